"""Command line entry point: run the API server or generate ideas once."""

import asyncio
import json

import typer
import uvicorn

from socialgenius.api import GENERATE_IDEAS_PATH, create_app
from socialgenius.exceptions import GenerationError
from socialgenius.factory import create_ai_service
from socialgenius.utils.config import config
from socialgenius.utils.logger import logger

app = typer.Typer()


@app.command()
def serve(host: str = config.host, port: int = config.port):
    """
    Run the HTTP API.
    """
    api = create_app()

    logger.info("=" * 70)
    logger.info(f"Server running on http://{host}:{port}")
    logger.info("=" * 70)
    logger.info("Available endpoints:")
    logger.info("   GET  /                        - API information")
    logger.info("   GET  /api/status              - Server status")
    logger.info(f"   POST {GENERATE_IDEAS_PATH:<25}- Generate content ideas")
    logger.info("-" * 70)
    logger.info("Configuration:")
    logger.info(f"   - Environment: {config.app_env}")
    logger.info(f"   - AI provider: {config.ai_provider}")
    logger.info(f"   - CORS: {', '.join(config.allowed_origins)}")
    logger.info(f"   - Rate limit: {config.rate_limit_per_minute} requests per minute")
    logger.info("=" * 70)

    uvicorn.run(api, host=host, port=port, log_level=config.log_level.lower())


@app.command()
def generate(business_type: str):
    """
    Generate content ideas for BUSINESS_TYPE and print them as JSON.
    """
    try:
        ai_service = create_ai_service()
        ideas = asyncio.run(ai_service.generate_ideas(business_type))
    except GenerationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps([idea.model_dump() for idea in ideas], indent=2, ensure_ascii=False))


if __name__ == "__main__":
    app()
