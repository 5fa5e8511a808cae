from fastapi import APIRouter
from mindcare.models.request_models import ChatRequest
from mindcare.models.response_models import ChatResponse, GreetingResponse
from mindcare.services.chat_service import respond, start_session

router = APIRouter()


@router.get("/{user_id}/greeting", response_model=GreetingResponse)
def chat_greeting(user_id: str):
    return start_session(user_id)


@router.post("/", response_model=ChatResponse)
def chat_reply(payload: ChatRequest):
    return respond(payload.user_id, payload.message)
