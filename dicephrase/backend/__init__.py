import logging
from importlib import import_module

# each symbol must be provided by one of the backends
# noinspection PyUnresolvedReferences
__all__ = (
    'randombytes',
)

# ordered by priority, the first one providing a function will be picked
# (standard always provides randombytes, the surrogate covers future symbols)
all_backend_names = ('pynacl', 'standard')

symbol_provided_by = {
    'randombytes': ('pynacl', 'standard'),
}

available_backends = ()
for backend_name in all_backend_names:
    try:
        available_backends += (import_module('.' + backend_name, __name__),)
    except ImportError:
        pass
del backend_name

log = logging.getLogger(__name__)


class MissingError(RuntimeError):

    def __init__(self, msg):
        RuntimeError.__init__(self, msg)


class MissingSurrogate:

    def __init__(self, name, backends):
        self._name, self._backends = name, backends

    def _missing(self):
        raise MissingError(f"Missing {self._name}. Please install {' or '.join(self._backends)}.")

    def __getattr__(self, item):
        self._missing()

    def __call__(self, *args, **kwargs):
        self._missing()


def short_name(backend) -> str:
    return backend.__name__.split('.')[-1]


def __getattr__(name):
    if name not in symbol_provided_by:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    provided_by_backends = symbol_provided_by[name]
    for backend in available_backends:
        if short_name(backend) in provided_by_backends:
            log.debug("Using %s from %s", name, backend.__name__)
            return getattr(backend, name)
    return MissingSurrogate(name, provided_by_backends)
