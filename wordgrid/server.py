import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from wordgrid.errors import DictionaryUnavailable, InvalidBoard
from wordgrid.lexicon import default_provider
from wordgrid.settings import settings


def log_level(cfg) -> int | str:
    return logging.DEBUG if cfg.DEBUG else cfg.LOG_LEVEL.upper()


logging.basicConfig(level=log_level(settings), format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordgrid")


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        provider = default_provider()
        logger.info("Loading dictionary from %s (min_length=%d)", provider.path, provider.min_length)
        try:
            provider.get()
        except DictionaryUnavailable as exc:
            logger.warning("Dictionary not loaded at startup: %s", exc)
        yield

    application = FastAPI(title="Word Grid Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {"status": "ok", "lexicon_loaded": default_provider().loaded}

    @application.post("/solve")
    async def solve(request: Request):
        from wordgrid.metrics import StageTimer
        from wordgrid.scoring import Ranking, total_score
        from wordgrid.solver import solve as solve_board

        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(body, dict) or "board" not in body:
            raise HTTPException(400, "Request body must be an object with a 'board' field")

        requested = body.get("ranking", settings.RANKING)
        try:
            ranking = Ranking(requested)
        except ValueError:
            raise HTTPException(400, f"Unknown ranking: {requested!r}")
        max_results = body.get("max_results", settings.MAX_RESULTS)
        if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results < 0:
            raise HTTPException(400, "max_results must be a non-negative integer")

        board = body["board"]
        timer = StageTimer()
        try:
            words = solve_board(board, ranking=ranking, max_results=max_results, timer=timer)
        except InvalidBoard as exc:
            raise HTTPException(400, str(exc))
        except DictionaryUnavailable as exc:
            logger.error("Solve failed: %s", exc)
            raise HTTPException(503, str(exc))

        return JSONResponse({
            "board": board,
            "words": words,
            "word_count": len(words),
            "total_score": total_score(words),
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from wordgrid.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordgrid.settings import update_settings, get_editable_settings
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(body, dict):
            raise HTTPException(400, "Request body must be a JSON object")
        previous_min_length = settings.MIN_WORD_LENGTH
        errors = update_settings(settings, **body)
        if settings.MIN_WORD_LENGTH != previous_min_length:
            default_provider().reset(min_length=settings.MIN_WORD_LENGTH)
            logger.info("Dictionary will reload with min_length=%d", settings.MIN_WORD_LENGTH)
        logger.setLevel(logging.DEBUG if settings.DEBUG else logging.NOTSET)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
