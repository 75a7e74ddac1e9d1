import os
import typing as t

import jinja2

from .globals import STOREFRONT_LOGGER

if t.TYPE_CHECKING:
    from .view import View

logger = STOREFRONT_LOGGER.getChild(__name__)


class TemplateEngine:
    """Jinja2 based template rendering

    Project template directories are searched first, so a project can
    replace single templates of this package.
    """

    def __init__(
        self,
        search_paths: t.Sequence[str | os.PathLike] = (),
        *,
        auto_reload: bool = False,
        **env_options: t.Any,
    ):
        loaders: list[jinja2.BaseLoader] = []
        if search_paths:
            loaders.append(jinja2.FileSystemLoader([os.fspath(p) for p in search_paths]))
        loaders.append(jinja2.PackageLoader("viur.storefront", "templates"))
        self.env = jinja2.Environment(
            loader=jinja2.ChoiceLoader(loaders),
            autoescape=jinja2.select_autoescape(default=True),
            auto_reload=auto_reload,
            **env_options,
        )

    def render(self, template_name: str, view: "View") -> str:
        logger.debug(f"Rendering {template_name!r}")
        template = self.env.get_template(template_name)
        return template.render(view.as_template_context())
