import logging
from typing import Dict, Type

from config import GlobalConfig
from errors import UnsupportedFormatError
from .base import BaseRenderer
from .ascii_renderer import AsciiRenderer
from .markdown_renderer import MarkdownRenderer
from .html_renderer import HtmlRenderer

# --- 在这里注册新的输出格式 ---
RENDERER_CLASSES: Dict[str, Type[BaseRenderer]] = {
    "ascii": AsciiRenderer,
    "markdown": MarkdownRenderer,
    "html": HtmlRenderer,
}

logger = logging.getLogger(__name__)


def get_renderer(output_format: str, global_config: GlobalConfig) -> BaseRenderer:
    """
    工厂方法：根据格式名称返回渲染器实例。
    格式不在封闭集合内时抛出 UnsupportedFormatError。
    """
    renderer_cls = RENDERER_CLASSES.get((output_format or "").lower())
    if renderer_cls is None:
        raise UnsupportedFormatError(output_format, supported=RENDERER_CLASSES.keys())
    renderer = renderer_cls(global_config)
    logger.info(f"🔌 [Factory] 使用输出格式: {renderer.name} ({renderer_cls.__name__})")
    return renderer
