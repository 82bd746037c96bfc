from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


# targets a reviewer may set; pending is only ever the initial value
REVIEW_STATUSES = frozenset({ApplicationStatus.ACCEPTED.value, ApplicationStatus.REJECTED.value})


class CamelModel(BaseModel):
    """Wire and storage documents use camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectIn(CamelModel):
    project_name: str = Field(min_length=1)
    project_description: str = Field(min_length=1)
    team_size: int = Field(ge=1)


class Project(ProjectIn):
    id: str = Field(alias="_id")


class ApplicationIn(CamelModel):
    project_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    experience: str = ""
    year: str = ""
    cgpa: List[float] = []
    message: str = ""


class Application(ApplicationIn):
    id: str = Field(alias="_id")
    status: ApplicationStatus = ApplicationStatus.PENDING
    notification_sent: bool = False


class StatusUpdate(BaseModel):
    # plain str: an unknown value is a 400 from the review workflow, not a 422
    status: str


class Message(BaseModel):
    message: str
