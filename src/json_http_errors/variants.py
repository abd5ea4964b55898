"""Named errors, one per catalog status code, and the ``create_error`` factory."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .catalog import STATUS_CATALOG
from .errors import HttpError
from .options import get_status_code


class BadRequest(HttpError):
    preset_status = 400


class Unauthorized(HttpError):
    preset_status = 401


class Forbidden(HttpError):
    preset_status = 403


class NotFound(HttpError):
    preset_status = 404


class MethodNotAllowed(HttpError):
    preset_status = 405


class NotAcceptable(HttpError):
    preset_status = 406


class ProxyAuthenticationRequired(HttpError):
    preset_status = 407


class RequestTimeout(HttpError):
    preset_status = 408


class Conflict(HttpError):
    preset_status = 409


class Gone(HttpError):
    preset_status = 410


class LengthRequired(HttpError):
    preset_status = 411


class PreconditionFailed(HttpError):
    preset_status = 412


class PayloadTooLarge(HttpError):
    preset_status = 413


class URITooLong(HttpError):
    preset_status = 414


class UnsupportedMediaType(HttpError):
    preset_status = 415


class RangeNotSatisfiable(HttpError):
    preset_status = 416


class ExpectationFailed(HttpError):
    preset_status = 417


class ImATeapot(HttpError):
    preset_status = 418


class MisdirectedRequest(HttpError):
    preset_status = 421


class UnprocessableEntity(HttpError):
    preset_status = 422


class Locked(HttpError):
    preset_status = 423


class FailedDependency(HttpError):
    preset_status = 424


class TooEarly(HttpError):
    preset_status = 425


class UpgradeRequired(HttpError):
    preset_status = 426


class PreconditionRequired(HttpError):
    preset_status = 428


class TooManyRequests(HttpError):
    preset_status = 429


class RequestHeaderFieldsTooLarge(HttpError):
    preset_status = 431


class UnavailableForLegalReasons(HttpError):
    preset_status = 451


class InternalServerError(HttpError):
    preset_status = 500


class NotImplemented(HttpError):  # noqa: A001
    preset_status = 501


class BadGateway(HttpError):
    preset_status = 502


class ServiceUnavailable(HttpError):
    preset_status = 503


class GatewayTimeout(HttpError):
    preset_status = 504


class HTTPVersionNotSupported(HttpError):
    preset_status = 505


class VariantAlsoNegotiates(HttpError):
    preset_status = 506


class InsufficientStorage(HttpError):
    preset_status = 507


class NetworkAuthenticationRequired(HttpError):
    preset_status = 511


def _build_error_classes() -> Mapping[int, type[HttpError]]:
    classes: dict[int, type[HttpError]] = {}
    for cls in HttpError.__subclasses__():
        code = cls.preset_status
        if code is None or cls.__module__ != __name__:
            continue
        if code not in STATUS_CATALOG:
            raise RuntimeError(f"{cls.__name__} has no catalog entry for {code}")
        classes[code] = cls
    return MappingProxyType(dict(sorted(classes.items())))


ERROR_CLASSES: Mapping[int, type[HttpError]] = _build_error_classes()


def create_error(code: int | str | None, message: str | None = None) -> HttpError:
    """Create the named error for *code*, or a generic HttpError.

    An invalid *code* yields a default 500 error.
    """
    status_code = get_status_code(code)
    if status_code is not None:
        cls = ERROR_CLASSES.get(int(status_code))
        if cls is not None:
            return cls(message)
    return HttpError({"status_code": status_code, "message": message})
