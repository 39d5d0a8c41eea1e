"""
Long-form docstrings of the public API.

Each `docs_<module>.py` defines a dictionary `DOCS`, which `nudecay.<module>` hands to `generate_docs` after its definitions.
"""
import inspect

def generate_docs(docs : dict, namespace : dict | None = None):
    """
    Attach docstrings to the objects of a module.

    Parameters
    ----------
    docs : dict
        maps "module", "name" or "Class.attribute" to a docstring
    namespace : dict or None
        the globals of the documented module. If None, the globals of the caller are used.

    Raises
    ------
    KeyError
        if a documented name is not defined in `namespace`.
    """
    if namespace is None:
        namespace = inspect.currentframe().f_back.f_globals

    for name, docstring in docs.items():
        if name == "module":
            namespace["__doc__"] = docstring
            continue

        objname, _, attr = name.partition(".")
        if objname not in namespace:
            raise KeyError(f"Cannot document '{name}', '{objname}' is not defined in '{namespace.get('__name__')}'.")

        obj = namespace[objname]
        if attr:
            obj = getattr(obj, attr)
        obj.__doc__ = docstring
    return
