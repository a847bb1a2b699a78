"""HTTP routes. Thin: parse the request, call the Service, return its response model."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.models import (
    GameRecordResponse,
    GameStateResponse,
    MoveRequest,
    MoveResponse,
    RecordGameRequest,
    WinRecordResponse,
)
from src.db.database import get_db
from src.db.sql_repository import SQLOutcomeRepository
from src.services.checkers_service import CheckersService

router = APIRouter()


def get_checkers_service(db: Session = Depends(get_db)) -> CheckersService:
    return CheckersService(SQLOutcomeRepository(db))


@router.post(
    "/new-game", response_model=GameStateResponse, response_model_exclude_none=True
)
def new_game(
    service: CheckersService = Depends(get_checkers_service),
) -> GameStateResponse:
    return service.new_game()


@router.post(
    "/make-move",
    response_model=MoveResponse,
    responses={status.HTTP_501_NOT_IMPLEMENTED: {"description": "No rules engine"}},
)
def make_move(
    request: MoveRequest,
    service: CheckersService = Depends(get_checkers_service),
) -> MoveResponse:
    return service.make_move(request)


@router.get("/win-record", response_model=WinRecordResponse)
def win_record(
    service: CheckersService = Depends(get_checkers_service),
) -> WinRecordResponse:
    return service.win_record()


@router.post(
    "/games", response_model=GameRecordResponse, status_code=status.HTTP_201_CREATED
)
def record_game(
    request: RecordGameRequest,
    service: CheckersService = Depends(get_checkers_service),
) -> GameRecordResponse:
    return service.record_game(request)
