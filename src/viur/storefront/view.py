import collections.abc
import typing as t
import urllib.parse

from .globals import SENTINEL, STOREFRONT_LOGGER

if t.TYPE_CHECKING:
    from .context import Context

logger = STOREFRONT_LOGGER.getChild(__name__)


class View(collections.abc.MutableMapping):
    """
    The per-request field bag between the clients and the templates.

    Every client writes its fields with a section prefix
    (``standard_basket``, ``address_countries``, ``stock_body``, ...),
    the templates read them as variables.
    The view also gives access to the request parameters, the configuration
    and the template engine of the request context.
    """

    def __init__(
        self,
        context: "Context",
        params: t.Mapping[str, t.Any] | None = None,
        **values: t.Any,
    ):
        self.context = context
        self.params: dict[str, t.Any] = dict(params or {})
        self._values: dict[str, t.Any] = dict(values)

    # --- Mapping -------------------------------------------------------------

    def __getitem__(self, key: str) -> t.Any:
        return self._values[key]

    def __setitem__(self, key: str, value: t.Any) -> None:
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> t.Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} fields={list(self._values)!r} params={self.params!r}>"

    # --- helpers -------------------------------------------------------------

    def param(self, name: str, default: t.Any = None) -> t.Any:
        """Get a request parameter.

        ``name`` may address nested values with slashes (``b_prod/0/prodid``).
        """
        node: t.Any = self.params
        for part in name.split("/"):
            if isinstance(node, t.Mapping):
                node = node.get(part, SENTINEL)
            elif isinstance(node, (list, tuple)) and part.isdigit() and int(part) < len(node):
                node = node[int(part)]
            else:
                node = SENTINEL
            if node is SENTINEL:
                return default
        return node

    def config(self, path: str, default: t.Any = None) -> t.Any:
        return self.context.config.get(path, default)

    def append(self, key: str, *values: t.Any) -> list[t.Any]:
        """Append values to a list field, creating it if necessary"""
        self._values[key] = [*self._values.get(key, []), *values]
        return self._values[key]

    def translate(self, domain: str, message: str) -> str:
        return self.context.translate(domain, message)

    def url(
        self,
        target: str | None,
        controller: str,
        action: str,
        params: t.Mapping[str, t.Any] | None = None,
        trailing: t.Sequence[str] = (),
        config: t.Mapping[str, t.Any] | None = None,
    ) -> str:
        """Build a link to a page of the storefront.

        Uses the url builder of the context if the application set one.
        """
        if (builder := self.context.url_builder) is not None:
            return builder(target, controller, action, params or {}, trailing, config or {})
        parts = [target.strip("/")] if target else []
        parts += [controller, action, *trailing]
        url = "/" + "/".join(urllib.parse.quote(str(part)) for part in parts if part)
        if params:
            url += "?" + urllib.parse.urlencode(params, doseq=True)
        return url

    def render(self, template_name: str) -> str:
        return self.context.templates.render(template_name, self)

    def as_template_context(self) -> dict[str, t.Any]:
        return {**self._values, "view": self}
