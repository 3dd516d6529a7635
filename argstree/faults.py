"""
argstree faults (errors) and rendering.

Scope
- Cause: canonical, stable string identifiers for every failure the parser and
  the spec builder can report. Causes are mutually exclusive.
- ArgsTreeError: the single exception type; carries the cause, the message and
  the parse context of the failure site (raw token, alias, accumulated
  arguments, specification in force) and knows how to render itself.
- trigger(): central entry point to surface a fault (raise, or print and exit).

Integration
- Library code raises ArgsTreeError directly; parsing is aborted on the first fault.
- Applications that want shell-style output call trigger(error, shell=True, ...)
  in their except clause.
- Host configuration is read from __main__:
  • __prog__: program name shown in the header (defaults to "argstree").
  • __styles__: mapping of style overrides (see ArgsTreeError.__rich__).
"""
import sys
from collections import defaultdict
from enum import StrEnum

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

console = Console(stderr=True)


class Cause(StrEnum):
    """
    canonical fault causes.

    - VALIDATE: the caller-supplied validate predicate returned a falsy value.
    - INVALID_OPTIONS: a specification's own min/max/max_read bounds contradict each other.
    - INVALID_RANGE: a node's final argument count is outside [min, max].
    - INVALID_SPEC: malformed incremental construction in the spec builder.
    - UNRECOGNIZED_ALIAS: an alias cluster left unmatched characters.
    - UNRECOGNIZED_ARGUMENT: an option-like token under a strict node, or a
      required match that was not found.
    """
    VALIDATE = "validate"
    INVALID_OPTIONS = "invalid-options"
    INVALID_RANGE = "invalid-range"
    INVALID_SPEC = "invalid-spec"
    UNRECOGNIZED_ALIAS = "unrecognized-alias"
    UNRECOGNIZED_ARGUMENT = "unrecognized-argument"

    @property
    def label(self):
        return self.value.replace("-", " ")

    @property
    def hint(self):
        return _HINTS[self]


_HINTS = {
    Cause.VALIDATE: "check the values given to this option or command",
    Cause.INVALID_OPTIONS: "min must not exceed max, and max_read must not exceed max",
    Cause.INVALID_RANGE: "pass the expected number of arguments",
    Cause.INVALID_SPEC: "declare each option, command and alias once, before configuring it",
    Cause.UNRECOGNIZED_ALIAS: "split the cluster into separate, known aliases",
    Cause.UNRECOGNIZED_ARGUMENT: "remove the argument or declare it as an option or command",
}


class ArgsTreeError(Exception):
    """
    the argstree error.

    attributes
    - cause: Cause
    - message: str
    - raw: str | None
      the raw token of the node at the failure site (None for the root or a root spec).
    - alias: str | None
      the alias used to reach that node, if any.
    - arguments: list[str]
      the arguments accumulated so far (the node's own list, not a copy).
      named apart from Exception.args, which holds the message.
    - options: Mapping | None
      the specification object in force at the failure site (the caller's object).
    """
    VALIDATE_ERROR = Cause.VALIDATE
    INVALID_OPTIONS_ERROR = Cause.INVALID_OPTIONS
    INVALID_RANGE_ERROR = Cause.INVALID_RANGE
    INVALID_SPEC_ERROR = Cause.INVALID_SPEC
    UNRECOGNIZED_ALIAS_ERROR = Cause.UNRECOGNIZED_ALIAS
    UNRECOGNIZED_ARGUMENT_ERROR = Cause.UNRECOGNIZED_ARGUMENT

    def __init__(self, message, /, *, cause, raw=None, alias=None, arguments=(), options=None):
        super().__init__(message)
        self.message = message
        self.cause = Cause(cause)
        self.raw = raw
        self.alias = alias
        self.arguments = arguments
        self.options = options

    def __str__(self):
        return self.message

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r}, cause={self.cause.value!r})"

    def to_dict(self):
        """
        serializable snapshot of the error (arguments copied into a new list).
        """
        return {
            "name": type(self).__name__,
            "cause": self.cause.value,
            "message": self.message,
            "raw": self.raw,
            "alias": self.alias,
            "args": list(self.arguments),
            "options": self.options,
        }

    def __rich__(self, *, fancy=False, colorful=True):
        main = __import__("__main__")

        styles = defaultdict(str, {
            "prog-name": "bold #E6E6F0",
            "cause": "bold #00E5FF",
            "error-title": "bold #FF4DA6",
            "error-message": "#C8C8D0",
            "context": "dim",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        } | getattr(main, "__styles__", {}))

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            return Text(str(fragment), styles[style] if colorful else "")

        header = Text.assemble(
            "[ ",
            text(getattr(main, "__prog__", "argstree"), "prog-name"),
            " — ",
            text(self.cause.value, "cause"),
            " | ",
            text(self.cause.label.title(), "error-title"),
            " ]",
        )
        message = text(self.message, "error-message")
        context = []
        if self.raw is not None:
            context.append(f"raw: {self.raw}")
        if self.alias is not None:
            context.append(f"alias: {self.alias}")
        if self.arguments:
            context.append("args: " + " ".join(self.arguments))
        hint = Text.assemble(text(" → ", "hint-arrow"), text(self.cause.hint, "hint"))

        body = [message]
        if context:
            body.append(text(", ".join(context), "context"))
        body.append(hint)

        if fancy:
            return Panel(Group(*body), title=header, title_align="left")
        return Group(header, *body)

    def __trigger__(self, **options):
        if not options.get("shell"):
            raise self from None
        console.print(self.__rich__(fancy=bool(options.get("fancy")), colorful=options.get("colorful", True)))
        if options.get("deferred"):
            return
        sys.exit(1)


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    options
    - shell: bool
      when False (default) the fault is raised; when True it is printed to stderr.
    - fancy: bool
      render inside a titled panel.
    - colorful: bool
      apply styles (default True).
    - deferred: bool
      in shell mode, return after printing instead of exiting with status 1.

    errors
    - TypeError if the fault does not implement __trigger__.
    """
    if not hasattr(fault, "__trigger__") or not callable(fault.__trigger__):
        raise TypeError("trigger() argument must implement __trigger__ method")
    fault.__trigger__(**options)


__all__ = (
    "Cause",
    "ArgsTreeError",
    "trigger",
)
