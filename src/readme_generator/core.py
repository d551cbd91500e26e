import asyncio
import logging
import time

from readme_generator import config, context, llm, repo, workspace

logger = logging.getLogger(__name__)


async def generate_readme(
    repo_url: str,
    generator: llm.ReadmeGenerator,
    cfg: config.Config,
) -> str:
    repo_url = repo.validate_repo_url(repo_url)
    logger.info(f"Generating README for {repo_url}")

    async with workspace.working_directory() as workdir:
        t0 = time.monotonic()
        await repo.clone_repository(repo_url, workdir, cfg.clone)
        logger.info(f"Clone completed in {time.monotonic() - t0:.1f}s")

        ctx = await asyncio.to_thread(context.extract, workdir, cfg.context)
        logger.info(f"Key files in context: {', '.join(ctx.key_files) or 'none'}")

        t0 = time.monotonic()
        result = await generator.generate(repo_url, ctx.text)
        logger.info(f"Generation finished in {time.monotonic() - t0:.1f}s")

    if not result.ok:
        raise llm.GenerationBlockedError(result.reason)
    return result.readme
