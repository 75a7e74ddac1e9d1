import abc
import typing as t

from ..globals import HTML_OUTPUT_KEY, STOREFRONT_LOGGER
from ..types.exceptions import ConfigurationError

if t.TYPE_CHECKING:
    from ..context import Context
    from ..decorators import ClientDecorator
    from ..view import View

logger = STOREFRONT_LOGGER.getChild(__name__)


class ClientAbstract(abc.ABC):
    """
    Abstract base class for all html clients.

    A client renders one section of a page. It may consist of sub-clients,
    each rendering a part of the section inside the output of its parent.
    The sub-clients of a client are configured by name in
    ``client/html/<path>/subparts``, :attr:`default_subparts` is used if the
    configuration is missing.

    The rendering pipeline of a request is:

    1. :meth:`process` applies the request parameters (e.g. basket changes),
    2. :meth:`populate` adds the view data, the parent first, then the
       sub-clients in configured order,
    3. :meth:`get_header` and :meth:`get_body` render the templates.
    """

    default_subparts: t.ClassVar[tuple[str, ...]] = ()
    """Names of the sub-clients used if ``client/html/<path>/subparts`` is not configured"""

    template_body: t.ClassVar[str | None] = None
    """Body template, can be replaced by ``client/html/<path>/template-body``"""

    template_header: t.ClassVar[str | None] = None
    """Header template, can be replaced by ``client/html/<path>/template-header``"""

    def __init__(self, context: "Context", path: str):
        self.context = context
        self.path = path
        self._view: "View | None" = None
        self._object: "ClientAbstract | ClientDecorator | None" = None
        self._populated: "View | None" = None
        self._sub_clients: list["ClientAbstract | ClientDecorator"] | None = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} path={self.path!r}>"

    # --- View ----------------------------------------------------------------

    @property
    def view(self) -> "View":
        if self._view is None:
            raise ConfigurationError(f"No view set for client {self.path!r}")
        return self._view

    def set_view(self, view: "View") -> t.Self:
        self._view = view
        return self

    def get_object(self) -> "ClientAbstract | ClientDecorator":
        """The outermost decorator of this client, or the client itself"""
        return self._object or self

    def set_object(self, obj: "ClientAbstract | ClientDecorator") -> t.Self:
        self._object = obj
        return self

    def populate(self, view: "View") -> "View":
        """Add the view data of this client once per view.

        Uses the outermost decorator, so decorators see the call too.
        """
        if self._populated is not view:
            self.get_object().add_data(view)
            self._populated = view
        return view

    def add_data(self, view: "View") -> "View":
        """Add the fields of this client to the view.

        Implementations add their own fields and call ``super().add_data(view)``
        at the end, which adds the data of the sub-clients.
        """
        for sub_client in self.sub_clients:
            sub_client.populate(view)
        return view

    # --- Sub-clients ---------------------------------------------------------

    def get_sub_client_names(self) -> list[str]:
        return list(self.context.config.get(f"client/html/{self.path}/subparts", self.default_subparts))

    def get_sub_client(self, type: str, name: str | None = None) -> "ClientAbstract | ClientDecorator":
        """Create the sub-client ``type`` of this client

        :param type: Name of the sub-client, e.g. ``billing``.
        :param name: Implementation name, ``standard`` by default.
        """
        from ..factory import create_client  # import must stay here to avoid circular imports
        return create_client(self.context, f"{self.path}/{type}", name, view=self._view)

    @property
    def sub_clients(self) -> list["ClientAbstract | ClientDecorator"]:
        if self._sub_clients is None:
            self._sub_clients = [self.get_sub_client(name) for name in self.get_sub_client_names()]
        return self._sub_clients

    # --- Rendering -----------------------------------------------------------

    @abc.abstractmethod
    def get_body(self, uid: str = "") -> str:
        """Render the html code for the page body

        :param uid: Unique id of the output if the section is placed more than once on a page
        """
        ...

    def get_header(self, uid: str = "") -> str:
        """Render the html code for the page head, by default the headers of the sub-clients"""
        view = self.view
        return "".join(sub_client.set_view(view).get_header(uid) for sub_client in self.sub_clients)

    def render_sub_bodies(self, uid: str = "") -> str:
        view = self.view
        return "".join(sub_client.set_view(view).get_body(uid) for sub_client in self.sub_clients)

    def render_sub_headers(self, uid: str = "") -> str:
        return ClientAbstract.get_header(self, uid)

    def render_template(self, kind: t.Literal["body", "header"]) -> str:
        default = self.template_body if kind == "body" else self.template_header
        template = self.view.config(f"client/html/{self.path}/template-{kind}", default)
        if not template:
            raise ConfigurationError(f"No {kind} template configured for {self.path!r}")
        return self.view.render(template)

    # --- Processing ----------------------------------------------------------

    def process(self) -> None:
        """Apply the request parameters, by default processing the sub-clients in order"""
        view = self.view
        for sub_client in self.sub_clients:
            sub_client.set_view(view).process()

    def clear_cached(self) -> None:
        """Drop all html output cached in the session"""
        session = self.context.session
        keys = session.get(HTML_OUTPUT_KEY) or []
        for key in keys:
            session.pop(key, None)
        if keys:
            logger.debug(f"Cleared {len(keys)} cached outputs")
        session[HTML_OUTPUT_KEY] = []
