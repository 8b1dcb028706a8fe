"""
Command Line Interface for pynoisefield

Command line utilities giving access to noise field generation from the
terminal without writing Python scripts.

Available Commands:
- noisefield: Materialize a gradient noise field and report its statistics
"""

_CLI_SUBMODULES = {
    "noisefield": (".noise_commands", "noisefield"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
