from fastapi import APIRouter, Depends

from app.api.deps import get_controller
from app.api.endpoints.session import snapshot
from app.schemas.session import SessionRead
from app.services.chat_controller import ChatController

router = APIRouter()


@router.post("/start", response_model=SessionRead)
async def start_demo(controller: ChatController = Depends(get_controller)):
    controller.enter_demo()
    return snapshot(controller)


@router.post("/advance", response_model=SessionRead)
async def advance_demo(controller: ChatController = Depends(get_controller)):
    """Avance manual de un paso; no hace nada fuera del modo demo o con un mensaje en curso."""
    controller.advance_demo()
    return snapshot(controller)
