from typing import Optional

from apc_progress.core.models import (
    CourseOutline,
    CourseOutlineResponse,
    DailyVideoProgressPayload,
    GetMeResponse,
    StoreResult,
    StoreVideoProgressResponse,
    UserIdentity,
    VideoProgress,
    VideoProgressResponse,
)
from apc_progress.network.graphql_client import GraphQLClient


GET_ME_QUERY = """
query GetMe {
  me { initId, importId }
  studentSubjects { id, name }
  currentEducationPeriod { id }
}
"""

COURSE_OUTLINE_QUERY = """
query CourseOutline($subjectId: String!, $educationPeriod: String!, $filter: String) {
  courseOutline(subjectId: $subjectId, educationPeriod: $educationPeriod, filter: $filter) {
    units {
      displayName
      title
      subunits {
        resources {
          __typename
          ... on EmbeddedVideoResource {
            videoId
            displayName
          }
        }
      }
    }
  }
}
"""

VIDEO_PROGRESS_QUERY = """
query DailyVideoProgress($userId: Int!, $videoId: Int!) {
  videoProgress(userId: $userId, videoId: $videoId)
}
"""

STORE_VIDEO_PROGRESS_MUTATION = """
mutation StoreDailyVideoProgressMutation(
  $userId: Int!,
  $cbPersonid: String!,
  $videoId: Int!,
  $status: String!,
  $progress: String!,
  $watchedPercentage: String!,
  $playTimePercentage: String!
) {
  storeDailyVideoProgress(
    userId: $userId,
    videoId: $videoId,
    status: $status,
    cbPersonid: $cbPersonid,
    progress: $progress,
    watchedPercentage: $watchedPercentage,
    playTimePercentage: $playTimePercentage
  ) {
    ok
    __typename
  }
}
"""


def fetch_identity(client: GraphQLClient) -> UserIdentity:
    """
    Fetch the user id, import id (``cbPersonid``), current education period
    and enrolled subjects. ``client`` must point at the progress service.
    """
    data = client.query(GET_ME_QUERY)
    result = GetMeResponse.model_validate(data)
    return UserIdentity(
        user_id=result.me.initId,
        education_period=result.currentEducationPeriod.id,
        import_id=result.me.importId,
        subjects=result.studentSubjects,
    )


def fetch_course_outline(client: GraphQLClient, subject_id: str, education_period: str) -> CourseOutline:
    """Fetch units -> subunits -> resources for one subject. ``client`` must point at the units service."""
    variables = {
        "subjectId": subject_id,
        "educationPeriod": education_period,
        "filter": None,
    }
    data = client.query(COURSE_OUTLINE_QUERY, variables)
    return CourseOutlineResponse.model_validate(data).courseOutline


def decode_video_progress(raw: str) -> Optional[VideoProgress]:
    """
    The progress service returns ``videoProgress`` as a JSON *string* holding
    ``{"dailyVideoProgress": {"videoProgress": {...} | null}}``. Decode it and
    return the inner record, or ``None`` when the video was never started.
    """
    payload = DailyVideoProgressPayload.model_validate_json(raw)
    return payload.dailyVideoProgress.videoProgress


def fetch_video_progress(client: GraphQLClient, user_id: int, video_id: int) -> Optional[VideoProgress]:
    variables = {"userId": user_id, "videoId": video_id}
    data = client.query(VIDEO_PROGRESS_QUERY, variables)
    raw = VideoProgressResponse.model_validate(data).videoProgress
    return decode_video_progress(raw)


def store_video_progress(
    client: GraphQLClient,
    user_id: int,
    cb_person_id: str,
    video_id: int,
    progress: str,
    watched_percentage: str,
    status: str,
    play_time_percentage: str,
) -> StoreResult:
    """Overwrite the server-side progress record of one video."""
    variables = {
        "userId": user_id,
        "cbPersonid": cb_person_id,
        "videoId": video_id,
        "status": status,
        "progress": progress,
        "watchedPercentage": watched_percentage,
        "playTimePercentage": play_time_percentage,
    }
    data = client.query(STORE_VIDEO_PROGRESS_MUTATION, variables)
    return StoreVideoProgressResponse.model_validate(data).storeDailyVideoProgress
