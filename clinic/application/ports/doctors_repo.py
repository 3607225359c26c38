from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass
class DoctorDto:
    id: int
    name: str
    specialization: str
    phone: str
    email: Optional[str]
    status: str


class DoctorsRepository(Protocol):
    def create(self, name: str, specialization: str, phone: str, email: Optional[str], status: str) -> int:
        ...

    def list(self, active_only: bool = False) -> List[DoctorDto]:
        ...

    def get_by_id(self, doctor_id: int) -> Optional[DoctorDto]:
        ...

    def update(self, doctor_id: int, name: str, specialization: str, phone: str, email: Optional[str], status: str) -> bool:
        """Overwrite every mutable field; False when no row has that id."""
        ...
