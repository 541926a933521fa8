"""FastAPI webhook receiving Telegram updates.

POST /telegram answers 400 only when the body cannot be decoded. Every other
update gets 200, whatever happens downstream, so Telegram never redelivers it.
Outcomes are reported to the chat by the pipeline's notifier instead.

Usage:
    article-autoposter
    python -m article_autoposter.main_webhook
"""

from typing import Optional
import uvicorn
from fastapi import FastAPI, Request, BackgroundTasks, Response
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool
from .config import Settings, get_settings
from .errors import TriggerDecodeError
from .log import setup_logging, get_logger
from .pipeline.run import Pipeline
from .telegram.parse import parse_update
from .telegram.verify import verify_telegram_secret

logger = get_logger("webhook")

def create_app(settings: Optional[Settings] = None, pipeline: Optional[Pipeline] = None) -> FastAPI:
    settings = settings or get_settings()
    pipeline = pipeline or Pipeline.from_settings(settings)

    app = FastAPI(title="Article Autoposter")

    @app.get("/", response_class=PlainTextResponse)
    def health():
        return "The server is running."

    @app.post("/telegram")
    async def telegram_webhook(request: Request, background_tasks: BackgroundTasks):
        # 1. Verify secret token (if configured)
        verify_telegram_secret(request, settings)

        # 2. Decode update
        body = await request.body()
        try:
            update = parse_update(body)
        except TriggerDecodeError as e:
            logger.warning(f"Could not decode incoming Telegram update: {e}")
            return Response(content="bad request", status_code=400, media_type="text/plain")

        # 3. Run the pipeline off the event loop; stage failures are absorbed inside
        outcome = await run_in_threadpool(pipeline.run, update.message.text)
        logger.info(f"Update {update.update_id} finished in state {outcome.state.value}")

        # 4. Success notice goes out after the 200 is sent
        if outcome.succeeded:
            background_tasks.add_task(pipeline.acknowledge, outcome)

        return Response(status_code=200)

    return app

app = create_app()

def main():
    """Serve the webhook with uvicorn."""
    settings = get_settings()
    setup_logging(settings)
    logger.info(f"Starting server on {settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)

if __name__ == "__main__":
    main()
