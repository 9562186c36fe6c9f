"""Meeting processing endpoint.

``POST /api/process-meeting`` accepts one recording and runs the stages
described in `app.pipelines.meeting.flow`: validation, optional demo
short-circuit, transcription, analysis and Notion publishing.
"""

import logging
from typing import Optional

from fastapi import APIRouter, File, Header, UploadFile
from fastapi.responses import JSONResponse

from app.controllers.dependencies import PipelineDep
from app.pipelines.meeting import ProcessingConfig, read_upload
from app.views import ProcessingResponse

router = APIRouter(prefix="/api", tags=["meetings"])

logger = logging.getLogger(__name__)

DEMO_MODE_HEADER = "x-demo-mode"
DATABASE_ID_HEADER = "x-notion-database-id"

_AUDIO_FILE_UPLOAD = File(None)
_DEMO_MODE_HEADER = Header(None, alias=DEMO_MODE_HEADER)
_DATABASE_ID_HEADER = Header(None, alias=DATABASE_ID_HEADER)


@router.post("/process-meeting", response_model=ProcessingResponse)
async def process_meeting(
    pipeline: PipelineDep,
    audio: Optional[UploadFile] = _AUDIO_FILE_UPLOAD,
    demo_mode: Optional[str] = _DEMO_MODE_HEADER,
    database_id: Optional[str] = _DATABASE_ID_HEADER,
) -> JSONResponse:
    """Transcribe, analyze and publish one meeting recording.

    Failures are raised as ``MeetingProcessingError`` and rendered by the
    application's exception handler into the same envelope.
    """

    config = ProcessingConfig(
        demo_mode=(demo_mode or "").strip().lower() == "true",
        destination_id=database_id,
    )
    submission = await read_upload(audio)
    result = await pipeline.run(submission, config)

    envelope = ProcessingResponse.ok(result, is_demo=config.demo_mode)
    return JSONResponse(status_code=200, content=envelope.to_payload())
