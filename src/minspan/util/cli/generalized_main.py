import sys
import inspect
import argparse

def _add_parameter(parser, name, parameter):
    """
    Add one function parameter to an argument parser. Parameters without a
    default are positional; the rest become --name options.
    """

    if parameter.default is parameter.empty:
        parser.add_argument(name)
        return

    flag = f"--{name}"
    default = parameter.default

    # Boolean options are flags that flip the default
    if isinstance(default, bool):
        action = "store_false" if default else "store_true"
        parser.add_argument(flag, action=action)
    elif default is None:
        parser.add_argument(flag, default=None)
    else:
        parser.add_argument(flag, type=type(default), default=default)


def generalized_main(fcn, argv=None, prog=None):
    """
    Build a command line parser from the signature of a function, parse
    arguments, and call the function with them.

    Positional parameters are parsed as strings. Options take the type of
    their default, except None defaults, which are parsed as strings.

    Parameters
    ----------
    fcn: callable
        function to run. Its docstring is used as the help description.
    argv: iterable
        arguments to parse. if None, use sys.argv[1:]
    prog: str, optional
        program name shown in help. if None, use the function name.

    Returns
    -------
    object
        whatever `fcn` returns.
    """

    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(prog=prog or fcn.__name__,
                                     description=inspect.getdoc(fcn),
                                     formatter_class=argparse.RawTextHelpFormatter)

    for name, parameter in inspect.signature(fcn).parameters.items():
        _add_parameter(parser, name, parameter)

    args = parser.parse_args(argv)

    return fcn(**vars(args))
