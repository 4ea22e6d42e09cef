# pdfchat/api/v1/endpoints/document.py
import logging
from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from pdfchat.models.schemas import UploadResponse
from pdfchat.core.session import ChatSession, IngestResult
from pdfchat.dependencies import get_chat_session

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/upload", response_model=UploadResponse)
async def upload_documents(
    request: Request,
    session: ChatSession = Depends(get_chat_session)
):
    """Upload one or more PDFs. Every file part of the form is ingested, whatever its field name."""
    try:
        form = await request.form()
    except HTTPException as e:
        logger.warning("Rejected upload: malformed multipart body (%s)", e.detail)
        return UploadResponse(success=False, message=f"Invalid upload: {e.detail}")

    items = []
    for i, (field_name, value) in enumerate(form.multi_items()):
        if isinstance(value, UploadFile):
            identifier = value.filename or field_name or f"document-{i + 1}"
            items.append((identifier, await value.read()))
    await form.close()

    if not items:
        return UploadResponse(success=False, message="No file uploaded.")

    result = await run_in_threadpool(session.ingest, items)
    return UploadResponse(success=True, message=upload_message(result), stored=result.stored)


def upload_message(result: IngestResult) -> str:
    if result.stored:
        message = "PDF uploaded and processed successfully: " + ", ".join(result.stored)
    else:
        message = "No PDF could be processed."
    if result.failed:
        failures = "; ".join(f"{name} ({reason})" for name, reason in result.failed.items())
        message += f" Failed: {failures}"
    return message
