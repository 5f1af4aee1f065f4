from fastapi import APIRouter, Depends

from app.api.deps import get_controller
from app.schemas.chat_message import ActionRequest, FileUploadRequest, SendMessageRequest
from app.schemas.session import SessionRead
from app.services.chat_controller import ChatController

router = APIRouter()


def snapshot(controller: ChatController) -> SessionRead:
    return SessionRead.model_validate(controller.state, from_attributes=True)


@router.get("/", response_model=SessionRead)
async def get_session_state(controller: ChatController = Depends(get_controller)):
    return snapshot(controller)


@router.post("/messages", response_model=SessionRead)
async def send_message(
    message_in: SendMessageRequest,
    controller: ChatController = Depends(get_controller),
):
    await controller.send_message(message_in.content)
    return snapshot(controller)


@router.post("/actions", response_model=SessionRead)
async def run_action(
    action_in: ActionRequest,
    controller: ChatController = Depends(get_controller),
):
    controller.handle_action(action_in.action)
    return snapshot(controller)


@router.post("/uploads", response_model=SessionRead)
async def upload_file(
    upload_in: FileUploadRequest,
    controller: ChatController = Depends(get_controller),
):
    controller.handle_file_upload(upload_in.file_name)
    return snapshot(controller)
