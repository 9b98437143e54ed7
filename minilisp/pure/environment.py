"""Environment frames. Each frame owns its own bindings and points at the frame it was created in, so lookups walk
outward until a binding is found. Frames are shared freely: any number of child frames and closures can hold on to
the same parent.
"""

from minilisp.lang.error import ArityMismatch, UnboundSymbol


class Environment:
    """One scope level: a mapping of symbol name to value plus an optional parent Environment."""

    def __init__(self, params=(), args=(), parent=None):
        params = list(params)
        args = list(args)
        if len(params) != len(args):
            what = "(" + " ".join(params) + ")"
            raise ArityMismatch(what, len(params), len(args))

        self.bindings = dict(zip(params, args))  # insertion-ordered
        self._parent = parent

    @property
    def parent(self):
        """Enclosing Environment, or None for the root. Fixed at construction."""
        return self._parent

    def find(self, name):
        """Returns the innermost Environment in the chain that binds name. Raises UnboundSymbol otherwise."""
        env = self
        while env is not None:
            if name in env.bindings:
                return env
            env = env.parent
        raise UnboundSymbol(name)

    def lookup(self, name):
        return self.find(name)[name]

    def define(self, name, value):
        """Binds name in this frame, overwriting any existing binding in this frame only."""
        self.bindings[name] = value

    def assign(self, name, value):
        """Overwrites the existing binding of name wherever it lives in the chain."""
        self.find(name)[name] = value

    def names(self):
        """All names visible from this frame, innermost first, without duplicates."""
        seen = {}
        env = self
        while env is not None:
            for name in env.bindings:
                seen.setdefault(name, None)
            env = env.parent
        return list(seen)

    def __contains__(self, name):
        return name in self.bindings

    def __getitem__(self, name):
        return self.bindings[name]

    def __setitem__(self, name, value):
        self.bindings[name] = value

    def __repr__(self):
        inner = ", ".join(self.bindings)
        return f"Environment({{{inner}}}, parent={'None' if self.parent is None else '...'})"
