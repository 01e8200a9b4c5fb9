"""
Output renderers for ranked tag clouds.

The ranker knows nothing about markup; a tier is an opaque integer that the
HTML renderer maps to a CSS class name of the form ``f<tier>``.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import TagCloudConfig
from .errors import OutputUnavailableError
from .models import TagCloud

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
HTML_TEMPLATE = "tagcloud.html"

OUTPUT_FORMATS = ("html", "json", "text")

_environment = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def css_class_for_tier(tier: int, prefix: str = "f") -> str:
    """Map a font tier to its stylesheet class name."""
    return f"{prefix}{tier}"


def render_html(
    cloud: TagCloud,
    source_name: str,
    config: Optional[TagCloudConfig] = None
) -> str:
    """
    Render a complete HTML document for a tag cloud.

    Args:
        cloud: Ranked tag cloud
        source_name: Name of the input shown in the title and heading
        config: Stylesheet and class name settings

    Returns:
        HTML document as a string
    """
    config = config or TagCloudConfig()
    template = _environment.get_template(HTML_TEMPLATE)
    return template.render(
        cloud=cloud,
        source_name=source_name,
        stylesheet_url=config.stylesheet_url,
        inline_css=config.inline_css,
        tiers=config.tier_range,
        css_class=lambda tier: css_class_for_tier(tier, config.css_prefix),
    )


def render_json(cloud: TagCloud, source_name: str) -> str:
    """Render a tag cloud as a JSON document."""
    data = {"source": source_name}
    data.update(cloud.to_dict())
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def render_text(cloud: TagCloud) -> str:
    """Render a tag cloud as a plain-text table."""
    if not cloud.entries:
        return "No words found.\n"

    width = max(len("Word"), max(len(entry.word) for entry in cloud.entries))
    lines = [
        f"{'Word':<{width}} {'Count':>8} {'Tier':>6}",
        "-" * (width + 16),
    ]
    for entry in cloud.entries:
        lines.append(f"{entry.word:<{width}} {entry.count:>8} {entry.tier:>6}")
    lines.append("")
    lines.append(
        f"Showing {len(cloud)} of {cloud.distinct_words} distinct words "
        f"({cloud.total_words} total)"
    )
    return "\n".join(lines) + "\n"


def render(
    cloud: TagCloud,
    source_name: str,
    output_format: str = "html",
    config: Optional[TagCloudConfig] = None
) -> str:
    """
    Render a tag cloud in the requested format.

    Raises:
        ValueError: If output_format is not one of OUTPUT_FORMATS
    """
    if output_format == "html":
        return render_html(cloud, source_name, config)
    if output_format == "json":
        return render_json(cloud, source_name)
    if output_format == "text":
        return render_text(cloud)
    raise ValueError(f"Unknown output format '{output_format}'. Expected one of {OUTPUT_FORMATS}")


def write_output(content: str, path: Union[str, Path], encoding: str = "utf-8") -> Path:
    """
    Write a rendered document to disk.

    Raises:
        OutputUnavailableError: If the file cannot be written
    """
    path = Path(path)
    try:
        with open(path, "w", encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        raise OutputUnavailableError(str(path), e.strerror) from e

    logger.info(f"Wrote {len(content)} characters to {path}")
    return path
