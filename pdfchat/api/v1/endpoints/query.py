# pdfchat/api/v1/endpoints/query.py
from fastapi import APIRouter, Depends
from pdfchat.models.schemas import AskRequest, AskResponse
from pdfchat.core.session import ChatSession
from pdfchat.dependencies import get_chat_session

router = APIRouter()

@router.post("/ask", response_model=AskResponse, response_model_exclude_none=True)
def ask_question(
    request: AskRequest,
    session: ChatSession = Depends(get_chat_session)
):
    """Answer a question about the uploaded documents, continuing the current conversation.

    Rejections and provider failures propagate as PdfChatError and are
    rendered as {success: false, message} by the app's exception handler.
    """
    answer = session.ask(request.question or "")
    return AskResponse(success=True, answer=answer)
