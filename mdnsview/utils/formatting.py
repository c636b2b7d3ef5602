"""Display formatting for service types, service rows and details.

Provides pure string helpers used by the dashboard presenter:
- Service types: "_http._tcp.local." -> "http.tcp"
- Service rows: "<instance> - <host> - <address>:<port>"
- Timestamps: microseconds since the epoch -> local time with microseconds
"""

from datetime import datetime

from mdnsview.constants.values import (
    NO_ADDRESS_LABEL,
    NONE_LABEL,
    TIMESTAMP_FORMAT,
)
from mdnsview.models.core.service_entry import ServiceEntry

# Suffixes removed, in order, from names shown in the lists.
_LOCAL_SUFFIXES: tuple[str, ...] = (".local.", ".")


def _strip_suffixes(value: str, suffixes: tuple[str, ...] = _LOCAL_SUFFIXES) -> str:
    for suffix in suffixes:
        if suffix and value.endswith(suffix):
            value = value[: -len(suffix)]
    return value


def format_category(category: str) -> str:
    """Shorten a DNS-SD service type for the types list.

    Examples:
        "_http._tcp.local." -> "http.tcp"
        "_ipp._udp.local." -> "ipp.udp"
    """
    label = _strip_suffixes(category.lstrip("_"))
    return label.replace("._tcp", ".tcp").replace("._udp", ".udp")


def format_service_row(entry: ServiceEntry) -> str:
    """One-line summary of a service for the services list."""
    name = entry.fullname
    if name.endswith(entry.category):
        name = name[: -len(entry.category)]
    name = name.rstrip(".")
    host = _strip_suffixes(entry.host)
    address = entry.primary_address or NO_ADDRESS_LABEL
    return f"{name} - {host} - {address}:{entry.port}"


def format_timestamp_micros(timestamp_micros: int) -> str:
    """Render microseconds since the epoch as local wall-clock time."""
    seconds, micros = divmod(timestamp_micros, 1_000_000)
    moment = datetime.fromtimestamp(seconds).replace(microsecond=micros)
    return moment.strftime(TIMESTAMP_FORMAT)


def format_service_details(entry: ServiceEntry) -> str:
    """Multi-line description of a service for the details pane."""
    status = "Alive since" if entry.alive else "Offline since"
    lines = [
        f"{status}: {format_timestamp_micros(entry.timestamp_micros)}",
        "",
        f"Fullname: {entry.fullname}",
        f"Hostname: {entry.host}",
        f"Type: {entry.category}",
    ]
    if entry.subtype:
        lines.append(f"Subtype: {entry.subtype}")
    lines.append(f"Port: {entry.port}")
    lines.extend(["", "Addresses:", *(entry.addresses or [NONE_LABEL])])
    lines.extend(["", "TXT Records:", *(entry.txt_records or [NONE_LABEL])])
    return "\n".join(lines)
