"""
Typed contracts for the AP Classroom GraphQL payloads.

Field names mirror the wire format (camelCase) so responses validate as-is.
Only the fields the progress flow reads are declared. Anything else the
server sends is ignored.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


EMBEDDED_VIDEO_TYPENAME = "EmbeddedVideoResource"


class ApiModel(BaseModel):
    # ids arrive as strings or numbers depending on the service
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


# ============== GetMe ==============

class Me(ApiModel):
    initId: int
    """Numeric user id, sent by the server as a string."""
    importId: str
    """Secondary id used as ``cbPersonid`` by the progress mutation."""


class Subject(ApiModel):
    id: str
    name: str


class EducationPeriod(ApiModel):
    id: str


class GetMeResponse(ApiModel):
    me: Me
    studentSubjects: List[Subject]
    currentEducationPeriod: EducationPeriod


class UserIdentity(ApiModel):
    user_id: int
    education_period: str
    import_id: str
    subjects: List[Subject]


# ============== CourseOutline ==============

class Resource(ApiModel):
    typename: str = Field(alias="__typename")
    videoId: Optional[str] = None
    displayName: Optional[str] = None

    @property
    def is_video(self) -> bool:
        return self.typename == EMBEDDED_VIDEO_TYPENAME and bool(self.videoId)


class Subunit(ApiModel):
    resources: List[Resource] = Field(default_factory=list)


class Unit(ApiModel):
    displayName: str
    title: Optional[str] = None
    subunits: List[Subunit] = Field(default_factory=list)

    @property
    def label(self) -> str:
        return f"{self.displayName}: {self.title}" if self.title else self.displayName


class CourseOutline(ApiModel):
    units: Optional[List[Unit]] = None


class CourseOutlineResponse(ApiModel):
    courseOutline: CourseOutline


# ============== Video progress ==============

class VideoProgress(ApiModel):
    progress: Optional[str] = None
    """JSON array of per-segment flags, e.g. ``"[1,0,0,1]"``."""
    watchedPercentage: Optional[str] = None
    status: Optional[str] = None
    playTimePercentage: Optional[str] = None
    cbPersonid: Optional[str] = None


class DailyVideoProgress(ApiModel):
    videoProgress: Optional[VideoProgress] = None


class DailyVideoProgressPayload(ApiModel):
    """Shape of the JSON string carried inside ``videoProgress``."""

    dailyVideoProgress: DailyVideoProgress


class VideoProgressResponse(ApiModel):
    videoProgress: str


class StoreResult(ApiModel):
    ok: bool


class StoreVideoProgressResponse(ApiModel):
    storeDailyVideoProgress: StoreResult
