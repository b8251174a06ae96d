import json
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from apc_progress.core.course_api import (
    fetch_course_outline,
    fetch_identity,
    fetch_video_progress,
    store_video_progress,
)
from apc_progress.core.models import Resource, Subject, Unit, UserIdentity
from apc_progress.network.graphql_client import GraphQLClient
from apc_progress.utils.logging_utils import log_error, log_info, log_success, log_warning
from apc_progress.utils.prompt_utils import prompt_multi_select


# Unverified overestimate used when a video has no stored progress yet.
# The API exposes no segment count to derive it from.
DEFAULT_SEGMENT_COUNT = 20

COMPLETE_PERCENTAGE = "1.0"
COMPLETE_STATUS = "COMPLETE"


@dataclass
class RunSummary:
    updated: int = 0
    failed: int = 0
    skipped_subjects: List[str] = field(default_factory=list)


def make_complete_progress(progress: Optional[str] = None) -> Tuple[str, str, str, str]:
    """
    Build a fully-watched progress record.

    Returns ``(progress, watchedPercentage, status, playTimePercentage)``.
    The new progress marker keeps the segment count of ``progress`` when given,
    otherwise uses ``DEFAULT_SEGMENT_COUNT``. Raises ``ValueError`` if
    ``progress`` is not a JSON array.
    """
    if progress:
        segments = json.loads(progress)
        if not isinstance(segments, list):
            raise ValueError(f"progress marker is not an array: {progress!r}")
        complete = [1 for _ in segments]
    else:
        complete = [1] * DEFAULT_SEGMENT_COUNT
    marker = json.dumps(complete, separators=(",", ":"))
    return marker, COMPLETE_PERCENTAGE, COMPLETE_STATUS, COMPLETE_PERCENTAGE


def _select_subjects(identity: UserIdentity) -> List[str]:
    options = [(subject.name, subject.id) for subject in identity.subjects]
    return prompt_multi_select("Select classes to update progress for", options)


def _select_units(subject_name: str, units: List[Unit]) -> List[int]:
    options = [(unit.label, idx) for idx, unit in enumerate(units)]
    return prompt_multi_select(f"Select units for {subject_name}", options)


def _subject_name(subjects: List[Subject], subject_id: str) -> str:
    for subject in subjects:
        if subject.id == subject_id:
            return subject.name
    return subject_id


def _complete_video(fym_client: GraphQLClient, identity: UserIdentity, resource: Resource) -> bool:
    """Mark one video as watched. Errors are logged, never raised."""
    video_id = resource.videoId
    try:
        video_id = int(resource.videoId)
        log_info(f"Processing video: {resource.displayName} (ID: {video_id})")

        existing = fetch_video_progress(fym_client, identity.user_id, video_id)
        progress, watched, status, play_time = make_complete_progress(
            existing.progress if existing else None
        )
        cb_person_id = (existing.cbPersonid if existing else None) or identity.import_id

        result = store_video_progress(
            fym_client,
            identity.user_id,
            cb_person_id,
            video_id,
            progress,
            watched,
            status,
            play_time,
        )
    except Exception as exc:
        log_error(f"!!! Error processing video {video_id}: {exc}")
        return False

    if not result.ok:
        log_error(f"!!! Error updating progress for video ID {video_id}: {result.model_dump()}")
        return False
    return True


def _process_subject(
    fym_client: GraphQLClient,
    units_client: GraphQLClient,
    identity: UserIdentity,
    subject_id: str,
    summary: RunSummary,
):
    subject_name = _subject_name(identity.subjects, subject_id)
    log_info(f"Processing subject: {subject_name}")

    outline = fetch_course_outline(units_client, subject_id, identity.education_period)
    units = outline.units or []
    if not units:
        log_error(f"No units found for subject {subject_name}")
        summary.skipped_subjects.append(subject_name)
        return

    selected_unit_indices = _select_units(subject_name, units)
    if not selected_unit_indices:
        log_warning(f"No units selected for subject {subject_name}. Skipping.")
        summary.skipped_subjects.append(subject_name)
        return

    updated_before, failed_before = summary.updated, summary.failed
    for unit_idx in selected_unit_indices:
        unit = units[unit_idx]
        for subunit in unit.subunits:
            for resource in subunit.resources:
                if not resource.is_video:
                    continue
                if _complete_video(fym_client, identity, resource):
                    summary.updated += 1
                else:
                    summary.failed += 1

    log_success(
        f"Finished {subject_name}: {summary.updated - updated_before} videos updated, "
        f"{summary.failed - failed_before} failed."
    )


def run_progress_session(fym_client: GraphQLClient, units_client: GraphQLClient) -> RunSummary:
    """
    Pick subjects and units, then mark every embedded video in them as watched.

    Subjects, units and videos are handled one at a time in display order.
    A failing video is logged and skipped. An empty subject selection raises
    ``SystemExit(1)``.
    """
    identity = fetch_identity(fym_client)
    log_info(
        f"User ID: {identity.user_id} | Education Period: {identity.education_period} "
        f"| cbPersonid: {identity.import_id}"
    )

    selected_subjects = _select_subjects(identity)
    if not selected_subjects:
        log_error("No classes selected.")
        raise SystemExit(1)

    summary = RunSummary()
    for subject_id in selected_subjects:
        _process_subject(fym_client, units_client, identity, subject_id, summary)

    log_success(f"All done: {summary.updated} videos updated, {summary.failed} failed.")
    return summary
