import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from app.api.endpoints import chat
from app.api.endpoints import session
from app.api.endpoints import conversations
from app.api.endpoints import demo


from fastapi.middleware.cors import CORSMiddleware
from app.core.config import Settings
from app.database import engine, create_db_and_tables
from app.services.chat_controller import ChatController, seed_demo_conversations
from app.services.conversation_store import ConversationStore
from app.services.scheduler import AsyncioScheduler

settings = Settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(name)-30s | %(levelname)-7s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    store = ConversationStore(engine)
    seed_demo_conversations(store)
    controller = ChatController(store, AsyncioScheduler())
    app.state.controller = controller
    if settings.demo_autostart:
        controller.enter_demo()
    logger.info("Copilot session ready (demo_autostart=%s)", settings.demo_autostart)
    yield
    controller.close()


app = FastAPI(
    title="AGC-WARE Invoice Copilot",
    description="Chat de demostración para recepción, validación, clasificación y envío a ERP de facturas CFDI.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat.router, prefix="/api/chat", tags=["chat"])
app.include_router(session.router, prefix="/session", tags=["session"])
app.include_router(conversations.router, prefix="/conversations", tags=["conversations"])
app.include_router(demo.router, prefix="/demo", tags=["demo"])
