import logging

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.requests import Request
from fastapi.responses import HTMLResponse, JSONResponse

from readme_generator import config, core, llm, models, page, repo

logger = logging.getLogger(__name__)

USAGE_MESSAGE = "Send a POST request with a 'repoUrl' to generate a README."


async def repo_error_handler(request: Request, exc: repo.RepoError) -> JSONResponse:
    logger.error(f"Repository error: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def llm_error_handler(request: Request, exc: llm.LLMError) -> JSONResponse:
    logger.error(f"LLM error: {exc}")
    return JSONResponse(status_code=500, content={"error": exc.message})


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in exc.errors()
    )
    return JSONResponse(
        status_code=400,
        content={"error": f"Invalid repository URL provided. {messages}"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error")
    return JSONResponse(
        status_code=500,
        content={"error": "An internal server error occurred."},
    )


def get_generator(request: Request) -> llm.ReadmeGenerator:
    generator = request.app.state.generator
    if generator is None:
        raise llm.ConfigurationError("API key not configured.")
    return generator


def create_app(
    generator: llm.ReadmeGenerator | None = None,
    cfg: config.Config | None = None,
) -> FastAPI:
    cfg = cfg or config.get_config()
    if generator is None:
        try:
            generator = llm.ReadmeGenerator.from_config(cfg.llm)
        except llm.ConfigurationError:
            logger.error("GOOGLE_API_KEY is not set; README generation requests will fail.")

    app = FastAPI(title="Repository README Generator")
    app.state.generator = generator
    app.state.config = cfg

    app.add_exception_handler(repo.RepoError, repo_error_handler)
    app.add_exception_handler(llm.LLMError, llm_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/", response_class=HTMLResponse)
    async def index():
        return page.INDEX_HTML

    @app.get("/api/generate-readme", response_model=models.UsageResponse)
    async def usage() -> models.UsageResponse:
        return models.UsageResponse(message=USAGE_MESSAGE)

    @app.post(
        "/api/generate-readme",
        response_model=models.ReadmeResponse,
        responses={400: {"model": models.ErrorResponse}, 500: {"model": models.ErrorResponse}},
    )
    async def generate_readme(
        body: models.GenerateReadmeRequest,
        request: Request,
        generator: llm.ReadmeGenerator = Depends(get_generator),
    ) -> models.ReadmeResponse:
        readme = await core.generate_readme(body.repo_url, generator, request.app.state.config)
        return models.ReadmeResponse(readme=readme)

    return app


app = create_app()
