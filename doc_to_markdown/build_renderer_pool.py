"""Assembly of the default renderer pool."""

import os
from collections.abc import Callable

from doc_to_markdown.link_target import LinkTarget
from doc_to_markdown.output_file_for_namespace import namespace_file_name
from doc_to_markdown.render_document import render_assembly, render_container
from doc_to_markdown.render_member import render_member
from doc_to_markdown.render_param import render_param, render_typeparam
from doc_to_markdown.render_references import (
    render_name_ref,
    render_see,
    render_seealso,
)
from doc_to_markdown.render_sections import (
    render_code,
    render_example,
    render_exception,
    render_inline_code,
    render_paragraph,
    render_remarks,
    render_returns,
    render_value,
)
from doc_to_markdown.renderer_pool import RendererPool


def build_renderer_pool(
    newline: str = os.linesep,
    link_targets: dict[str, LinkTarget | None] | None = None,
    namespace_page: Callable[[str], str] = namespace_file_name,
) -> RendererPool:
    """Create a pool with a renderer registered for every supported tag."""
    pool = RendererPool(newline, link_targets, namespace_page)
    pool.register("doc", render_container)
    pool.register("members", render_container)
    pool.register("assembly", render_assembly)
    pool.register("member", render_member)
    pool.register("param", render_param)
    pool.register("typeparam", render_typeparam)
    pool.register("summary", render_paragraph)
    pool.register("para", render_paragraph)
    pool.register("remarks", render_remarks)
    pool.register("example", render_example)
    pool.register("returns", render_returns)
    pool.register("value", render_value)
    pool.register("exception", render_exception)
    pool.register("code", render_code)
    pool.register("c", render_inline_code)
    pool.register("see", render_see)
    pool.register("seealso", render_seealso)
    pool.register("paramref", render_name_ref)
    pool.register("typeparamref", render_name_ref)
    return pool
