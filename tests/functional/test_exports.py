import builtins

import genfp
from genfp import functional
from genfp.functional import sequences


def test_package_reexports_operations():
    for name in sequences.__all__:
        assert getattr(genfp, name) is getattr(sequences, name)
        assert getattr(functional, name) is getattr(sequences, name)


def test_star_import_leaves_builtins_untouched():
    namespace = {}
    exec("from genfp import *", namespace)

    assert namespace["map"] is genfp.map
    assert namespace["map"]([1, -2], abs) == [1, 2]
    for name in ("map", "filter"):
        assert getattr(builtins, name) is not getattr(genfp, name)
        assert isinstance(getattr(builtins, name), type)
