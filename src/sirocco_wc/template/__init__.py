"""Template management for sirocco-wc."""

from .catalog import TemplateKind, TemplateVariable, load_catalog
from .collector import collect_values
from .manager import get_template_path, get_template_root, stage_template
from .pipeline import InitPipeline, PipelineState
from .post_init import POST_INIT_STEPS, PostInitHook
from .relocator import relocate
from .renderer import substitute_tree

__all__ = [
    "InitPipeline",
    "POST_INIT_STEPS",
    "PipelineState",
    "PostInitHook",
    "TemplateKind",
    "TemplateVariable",
    "collect_values",
    "get_template_path",
    "get_template_root",
    "load_catalog",
    "relocate",
    "stage_template",
    "substitute_tree",
]
