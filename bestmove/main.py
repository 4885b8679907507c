from __future__ import annotations

from fastapi import APIRouter, FastAPI, HTTPException

from bestmove.api.schemas import EngineInfoResponse, MoveRequest, MoveResponse
from bestmove.application.services.best_move_service import BestMoveService
from bestmove.domain.errors import (
    EngineNotFoundError,
    EngineUnavailableError,
    InvalidFenError,
)
from bestmove.infrastructure.engine.stockfish_engine_adapter import StockfishEngineAdapter

app = FastAPI(title="Best Move API")

_engine_adapter = StockfishEngineAdapter()
_best_move = BestMoveService(_engine_adapter)

router = APIRouter(prefix="/api/v1")


@router.post("/move", response_model=MoveResponse)
async def best_move(request: MoveRequest) -> MoveResponse:
    try:
        result = await _best_move.execute(request.fen)
    except InvalidFenError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except EngineUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    return MoveResponse(fen=result.fen, move=result.move, status=result.status.value)


@router.get("/engine", response_model=EngineInfoResponse)
async def engine_info() -> EngineInfoResponse:
    try:
        path = _engine_adapter.engine_path()
    except EngineNotFoundError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return EngineInfoResponse(path=path)


app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("bestmove.main:app", host="0.0.0.0", port=8000, reload=False)
