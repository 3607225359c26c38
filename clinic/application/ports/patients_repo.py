from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass
class PatientDto:
    id: int
    first_name: str
    last_name: str
    gender: str
    dob: str
    phone: str
    email: Optional[str]
    address: Optional[str]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class PatientsRepository(Protocol):
    def create(self, first_name: str, last_name: str, gender: str, dob: str, phone: str, email: Optional[str], address: Optional[str]) -> int:
        ...

    def list(self) -> List[PatientDto]:
        ...

    def get_by_id(self, patient_id: int) -> Optional[PatientDto]:
        ...

    def update(self, patient_id: int, first_name: str, last_name: str, gender: str, dob: str, phone: str, email: Optional[str], address: Optional[str]) -> bool:
        ...
