from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import BaseModel

from .catalog import Style
from .convert import stylize

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


class SpecimenRow(BaseModel):
    token: str
    label: str
    styled: str


def _env(templates_dir: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(enabled_extensions=("html",)),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def specimen_rows(sample: str) -> List[SpecimenRow]:
    return [SpecimenRow(token=style.token, label=style.label, styled=stylize(style, sample)) for style in Style]


def render_specimen(sample: str, templates_dir: Path = TEMPLATES_DIR) -> str:
    """
    Render a Markdown table showing sample in every style, in catalog order.
    """
    template = _env(templates_dir).get_template("specimen.md.j2")
    return template.render(sample=sample, rows=specimen_rows(sample))


def write_specimen(out_path: Path, sample: str) -> None:
    out = render_specimen(sample)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(out)
    logger.info("Wrote specimen for %s styles to %s", len(Style), out_path)
