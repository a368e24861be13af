"""
Command line entry point: ``minspan QUERY REFERENCE``.
"""

from minspan.span import span, span_length
from minspan.util.io import read_yaml
from minspan.util.validation import check_choice
from minspan.util.cli import generalized_main

_DEFAULT_TOKENS = "chars"

# How a command line string is turned into a sequence of elements
_TOKENIZERS = {
    "chars": list,
    "words": str.split,
}

def find_span(query,
              reference,
              tokens=None,
              config=None):
    """
    Print the shortest window of REFERENCE that contains QUERY in order.

    Prints "start end length" (inclusive indices) or "no span". With
    --tokens words, elements are whitespace-separated words and indices count
    words. The default is --tokens chars. Elements are compared exactly; no
    case folding is done.

    --config takes a YAML file that may set 'tokens'. A --tokens value on the
    command line takes precedence over the file.
    """

    settings = {"tokens": None}
    if config is not None:
        loaded = read_yaml(config)
        for k in loaded:
            if k not in settings:
                err = f"Configuration has an unrecognized key '{k}'."
                raise ValueError(err)
        settings.update(loaded)

    # None means "not given on the command line", so the file value stays
    settings = read_yaml(settings, override_keys={"tokens": tokens})
    if settings["tokens"] is None:
        settings["tokens"] = _DEFAULT_TOKENS

    tokens = check_choice(settings["tokens"],
                          _TOKENIZERS,
                          param_name="tokens")
    tokenize = _TOKENIZERS[tokens]

    result = span(tokenize(query), tokenize(reference))
    if result is None:
        print("no span")
    else:
        print(f"{result[0]} {result[1]} {span_length(result)}")

    return result


def main(argv=None):
    """
    Run `find_span` from the command line. Returns an exit status of 0 when a
    span was found and 1 otherwise.
    """

    result = generalized_main(find_span, argv=argv, prog="minspan")
    if result is None:
        return 1
    return 0
