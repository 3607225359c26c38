# Importing the models package registers every table on SQLModel.metadata
from . import models  # noqa: F401
