import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Iterable, Optional

import yaml
from jinja2 import Template

from catalog.models import System

DEFAULT_PROMPTS_PATH = Path(__file__).resolve().parents[2] / "apps" / "configs" / "prompts.yaml"
PROMPT_NAME = "permission_suggestions"


@lru_cache(maxsize=8)
def load_prompts(path: Optional[str] = None) -> Dict[str, Dict[str, str]]:
    path = path or os.getenv("ACCESSDESK_PROMPTS_PATH") or str(DEFAULT_PROMPTS_PATH)
    with open(path) as f:
        return yaml.safe_load(f)


def format_system_list(catalog: Iterable[System]) -> str:
    """Render the catalog as ``"id" (name)`` pairs joined by commas."""
    return ", ".join(f'"{system.id}" ({system.name})' for system in catalog)


def render_messages(title: str, catalog: Iterable[System], prompts_path: Optional[str] = None) -> List[Dict[str, str]]:
    """
    Render the system+user message pair asking for permission suggestions.
    """
    cfg = load_prompts(prompts_path)[PROMPT_NAME]

    system_msg = Template(cfg["system"]).render().strip()
    user_msg = Template(cfg["user"]).render(
        title=title,
        system_list=format_system_list(catalog),
    ).strip()

    return [
        {"role": "system", "content": system_msg},
        {"role": "user", "content": user_msg},
    ]
