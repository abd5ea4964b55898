"""Static catalog of the standard 4xx/5xx errors."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .options import ErrorOptions

DEFAULT_STATUS_CODE = 500
DEFAULT_TITLE = "Internal Server Error"
DEFAULT_ERROR_MESSAGE = (
    "The server encountered an unexpected condition that prevented it from "
    "fulfilling the request"
)

_MDN = "https://developer.mozilla.org/en-US/docs/Web/HTTP/Status/{}"

# (status code, title, default message, reference link or None for MDN)
_ENTRIES: tuple[tuple[int, str, str, str | None], ...] = (
    (
        400,
        "Bad Request",
        "The server cannot or will not process the request because the received "
        "syntax is invalid, nonsensical, or exceeds some limitation on what the "
        "server is willing to process.",
        None,
    ),
    (
        401,
        "Unauthorized",
        "The request has not been applied because it lacks valid authentication "
        "credentials for the target resource.",
        None,
    ),
    (403, "Forbidden", "The server understood the request but refuses to authorize it.", None),
    (
        404,
        "Not Found",
        "The origin server did not find a current representation for the target "
        "resource or is not willing to disclose that one exists.",
        None,
    ),
    (
        405,
        "Method Not Allowed",
        "The method specified in the request-line is known by the origin server "
        "but not supported by the target resource.",
        None,
    ),
    (
        406,
        "Not Acceptable",
        "The target resource does not have a current representation that would be "
        "acceptable to the user agent, according to the proactive negotiation "
        "header fields received in the request, and the server is unwilling to "
        "supply a default representation.",
        None,
    ),
    (
        407,
        "Proxy Authentication Required",
        "Is similar to 401 (Unauthorized), but the client needs to authenticate "
        "itself in order to use a proxy.",
        None,
    ),
    (
        408,
        "Request Timeout",
        "The server did not receive a complete request message within the time "
        "that it was prepared to wait.",
        None,
    ),
    (
        409,
        "Conflict",
        "The request could not be completed due to a conflict with the current "
        "state of the resource.",
        None,
    ),
    (
        410,
        "Gone",
        "Indicates that access to the target resource is no longer available at "
        "the origin server and that this condition is likely to be permanent.",
        None,
    ),
    (
        411,
        "Length Required",
        "The server refuses to accept the request without a defined Content-Length.",
        None,
    ),
    (
        412,
        "Precondition Failed",
        "Indicates that one or more preconditions given in the request header "
        "fields evaluated to false when tested on the server.",
        None,
    ),
    (
        413,
        "Payload Too Large",
        "The server is refusing to process a request because the request payload "
        "is larger than the server is willing or able to process.",
        None,
    ),
    (
        414,
        "URI Too Long",
        "The server is refusing to service the request because the request-target "
        "is longer than the server is willing to interpret.",
        None,
    ),
    (
        415,
        "Unsupported Media Type",
        "The origin server is refusing to service the request because the payload "
        "is in a format not supported by the target resource for this method.",
        None,
    ),
    (
        416,
        "Range Not Satisfiable",
        "Indicates that none of the ranges in the request's Range header field "
        "overlap the current extent of the selected resource or that the set of "
        "ranges requested has been rejected due to invalid ranges or an excessive "
        "request of small or overlapping ranges.",
        None,
    ),
    (
        417,
        "Expectation Failed",
        "The expectation given in the request's Expect header field could not be "
        "met by at least one of the inbound servers.",
        None,
    ),
    (
        418,
        "I'm a teapot",
        "Any attempt to brew coffee with a teapot should result in the error code "
        "418 I'm a teapot.",
        None,
    ),
    (
        421,
        "Misdirected request",
        "The request was directed at a server that is not able to produce a "
        "response.  This can be sent by a server that is not configured to produce "
        "responses for the combination of scheme and authority that are included "
        "in the request URI.",
        "https://tools.ietf.org/html/rfc7540#section-9.1.2",
    ),
    (
        422,
        "Unprocessable Entity",
        "Means the server understands the content type of the request entity "
        "(hence a 415(Unsupported Media Type) status code is inappropriate), and "
        "the syntax of the request entity is correct (thus a 400 (Bad Request) "
        "status code is inappropriate) but was unable to process the contained "
        "instructions.",
        None,
    ),
    (
        423,
        "Locked",
        "Means the source or destination resource of a method is locked.",
        "https://tools.ietf.org/html/rfc2518#section-10.4",
    ),
    (
        424,
        "Failed Dependency",
        "Means that the method could not be performed on the resource because the "
        "requested action depended on another action and that action failed.",
        "https://tools.ietf.org/html/rfc2518#section-10.5",
    ),
    (
        425,
        "Too Early",
        "The server is unwilling to risk processing a request that might be replayed",
        None,
    ),
    (
        426,
        "Upgrade Required",
        "The server refuses to perform the request using the current protocol but "
        "might be willing to do so after the client upgrades to a different "
        "protocol.",
        None,
    ),
    (428, "Precondition Required", "The origin server requires the request to be conditional.", None),
    (
        429,
        "Too Many Requests",
        "The user has sent too many requests in a given amount of time.",
        None,
    ),
    (
        431,
        "Request Header Fields Too Large",
        "The server is unwilling to process the request because its header fields "
        "are too large.",
        None,
    ),
    (
        451,
        "Unavailable For Legal Reasons",
        "This request may not be serviced in the Roman Province of Judea due to the "
        "Lex Julia Majestatis, which disallows access to resources hosted on "
        "servers deemed to be operated by the People's Front of Judea.",
        None,
    ),
    (
        500,
        "Internal Server Error",
        "The server has encountered a situation it doesn't know how to handle.",
        None,
    ),
    (
        501,
        "Not Implemented",
        "The request method is not supported by the server and cannot be handled.",
        None,
    ),
    (
        502,
        "Bad Gateway",
        "This error response means that the server, while working as a gateway to "
        "get a response needed to handle the request, got an invalid response.",
        None,
    ),
    (503, "Service Unavailable", "The server is not ready to handle the request.", None),
    (
        504,
        "Gateway Time-out",
        "This error response is given when the server is acting as a gateway and "
        "cannot get a response from the up-stream server in time.",
        None,
    ),
    (
        505,
        "HTTP Version Not Supported",
        "The HTTP version used in the request is not supported by the server.",
        None,
    ),
    (
        506,
        "Variant Also Negotiates",
        "The server has an internal configuration error: the chosen variant "
        "resource is configured to engage in transparent content negotiation "
        "itself, and is therefore not a proper end point in the negotiation "
        "process.",
        "https://tools.ietf.org/html/rfc2295#section-8.1",
    ),
    (
        507,
        "Insufficient Storage",
        "Means the method could not be performed on the resource because the "
        "server is unable to store the representation needed to successfully "
        "complete the request.",
        "https://tools.ietf.org/html/rfc2518#section-10.6",
    ),
    (
        511,
        "Network Authentication Required",
        "The client needs to authenticate to gain network access.",
        "https://tools.ietf.org/html/rfc6585#section-6",
    ),
)


def _build_catalog() -> Mapping[int, ErrorOptions]:
    catalog: dict[int, ErrorOptions] = {}
    for code, title, message, link in _ENTRIES:
        catalog[code] = {
            "status_code": code,
            "message": message,
            "title": title,
            "type": link or _MDN.format(code),
        }
    return MappingProxyType(catalog)


STATUS_CATALOG: Mapping[int, ErrorOptions] = _build_catalog()


def get_preset(status_code: int) -> ErrorOptions | None:
    """Return a copy of the preset options for *status_code*, if any."""
    preset = STATUS_CATALOG.get(status_code)
    return dict(preset) if preset is not None else None  # type: ignore[return-value]
