from fastapi import Request

from app.services.chat_controller import ChatController


def get_controller(request: Request) -> ChatController:
    return request.app.state.controller
