from functools import wraps
from inspect import getfullargspec

_missing = object()


def autoassign(f):
    """
    autoassign(method) -> method

    allow an __init__ to assign its arguments, defaults included, as
    attributes of 'self' automatically.  E.g.

    >>> class Foo(object):
    ...     @autoassign
    ...     def __init__(self, foo, bar): pass
    ...
    >>> breakfast = Foo('spam', 'eggs')
    >>> breakfast.foo, breakfast.bar
    ('spam', 'eggs')

    The body runs afterwards, so it can check or normalize what was assigned:

    >>> class Bar(object):
    ...     @autoassign
    ...     def __init__(self, seed=None, alpha=1):
    ...         self.alpha = float(self.alpha)
    ...
    >>> b = Bar(seed=3)
    >>> b.seed, b.alpha
    (3, 1.0)
    """
    spec = getfullargspec(f)
    # Remove self from argnames
    argnames = spec.args[1:]
    defaults = dict(zip(reversed(argnames), reversed(spec.defaults or ())))
    @wraps(f)
    def decorated(self, *args, **kwargs):
        assigned = dict(defaults)
        assigned.update(zip(argnames, args))
        assigned.update(kwargs)
        self.__dict__.update(assigned)
        return f(self, *args, **kwargs)
    return decorated


class cached_property(object):
    """A decorator that converts a function into a lazy property.  The
    function wrapped is called the first time to retrieve the result
    and then that calculated result is used the next time you access
    the value::

        class Foo(object):

            @cached_property
            def foo(self):
                # calculate something important here
                return 42

    The class has to have a `__dict__` in order for this property to
    work.

    >>> class Counted(object):
    ...     calls = 0
    ...     @cached_property
    ...     def value(self):
    ...         Counted.calls += 1
    ...         return 42
    ...
    >>> c = Counted()
    >>> c.value, c.value, Counted.calls
    (42, 42, 1)
    """

    # implementation detail: this property is implemented as non-data
    # descriptor.  non-data descriptors are only invoked if there is
    # no entry with the same name in the instance's __dict__.
    # this allows us to completely get rid of the access function call
    # overhead.  If one choses to invoke __get__ by hand the property
    # will still work as expected because the lookup logic is replicated
    # in __get__ for manual invocation.

    def __init__(self, func, name=None, doc=None):
        self.__name__ = name or func.__name__
        self.__module__ = func.__module__
        self.__doc__ = doc or func.__doc__
        self.func = func

    def __get__(self, obj, type=None):
        if obj is None:
            return self
        value = obj.__dict__.get(self.__name__, _missing)
        if value is _missing:
            value = self.func(obj)
            obj.__dict__[self.__name__] = value
        return value
