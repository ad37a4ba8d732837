"""
Reference checks for element trees.

Every name the rendering engine has to resolve (component, pin, net)
is checked against the declarations in the tree before export.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import TYPE_CHECKING

from .models.net import NET_PREFIX

if TYPE_CHECKING:
    from .models.group import Group


_PIN_ENDPOINT = re.compile(r'^\.(?P<component>[^\s>]+) > \.(?P<pin>[^\s>]+)$')
_NET_ENDPOINT = re.compile(r'^' + re.escape(NET_PREFIX) + r'(?P<net>\S+)$')


class CheckError:
    """A reference check error or warning."""

    def __init__(self, severity: str, message: str, location: str = ""):
        self.severity = severity
        self.message = message
        self.location = location

    def __str__(self):
        loc = f" at {self.location}" if self.location else ""
        return f"Check {self.severity}: {self.message}{loc}"

    def __repr__(self):
        return f"CheckError({self.severity!r}, {self.message!r})"


def parse_endpoint(selector: str) -> tuple[str, str] | tuple[str, None] | None:
    """
    Split a trace endpoint selector.

    Returns:
        (component, pin) for '.U1 > .VCC', (net, None) for 'net.GND',
        None if the selector matches neither form.
    """
    if not isinstance(selector, str):
        return None
    match = _PIN_ENDPOINT.match(selector)
    if match:
        return match.group("component"), match.group("pin")
    match = _NET_ENDPOINT.match(selector)
    if match:
        return match.group("net"), None
    return None


def check_board(board: "Group", verbose: bool = True) -> list[CheckError]:
    """
    Check that the tree only references what it declares.

    Checks for:
    - Duplicate component or net names
    - Trace endpoints that do not parse
    - Endpoints naming an undeclared component, pin or net
    - Nets no trace touches (warning)

    Args:
        board: Board or group to check.
        verbose: Print detailed results.

    Returns:
        List of errors and warnings.
    """
    errors = []

    components = board.components
    nets = board.nets

    for kind, names in (
        ("component", [c.name for c in components]),
        ("net", [n.name for n in nets]),
    ):
        for name, count in Counter(names).items():
            if count > 1:
                errors.append(CheckError(
                    "error",
                    f"Duplicate {kind} name declared {count} times",
                    name,
                ))

    by_name = {c.name: c for c in components}
    net_names = {n.name for n in nets}
    used_nets = set()

    for trace in board.traces:
        for selector in (trace.from_, trace.to):
            parsed = parse_endpoint(selector)
            if parsed is None:
                errors.append(CheckError("error", "Malformed trace endpoint", selector))
                continue

            name, pin = parsed
            if pin is None:
                if name in net_names:
                    used_nets.add(name)
                else:
                    errors.append(CheckError("error", "Trace to undeclared net", selector))
            elif name not in by_name:
                errors.append(CheckError("error", "Trace to undeclared component", selector))
            elif not by_name[name].has_pin(pin):
                errors.append(CheckError(
                    "error",
                    f"Component has no pin {pin!r}",
                    selector,
                ))

    for net in nets:
        if net.name not in used_nets:
            errors.append(CheckError("warning", "Net has no traces", net.name))

    error_count = sum(1 for e in errors if e.severity == "error")
    warning_count = sum(1 for e in errors if e.severity == "warning")

    if verbose:
        if errors:
            print(f"\nCheck: {error_count} error(s), {warning_count} warning(s)")
            for err in errors:
                print(f"  {err}")
        else:
            print("\nCheck: No errors")

    return errors
