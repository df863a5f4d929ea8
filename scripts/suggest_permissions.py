# scripts/suggest_permissions.py
# Print the catalog systems the configured model suggests for a job title.
#   python scripts/suggest_permissions.py "Senior Software Engineer"
import asyncio
import sys

from apps.config import AppConfig
from catalog.store import load_catalog
from apps.api.main import build_suggestion_client
from generation.exceptions import SuggestionFailedError
from orchestrator.registry import Registry


async def run(title: str) -> int:
    config = AppConfig()
    catalog = load_catalog(config.catalog_path)
    client = build_suggestion_client(Registry(config.components_path), config.prompts_path)
    if client is None:
        print("Suggestions are not configured (set SUGGESTION_API_KEY).")
        return 1

    names = catalog.names()
    try:
        suggested = await client.suggest(title, catalog.list())
    except SuggestionFailedError as e:
        print(e)
        return 1
    for system_id in suggested:
        print(f"{system_id}\t{names[system_id]}")
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2 or not sys.argv[1]:
        print("usage: suggest_permissions.py <job title>")
        sys.exit(2)
    sys.exit(asyncio.run(run(sys.argv[1])))
