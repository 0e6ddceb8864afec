# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
Bottom-up tree conversion without using the Python call stack.

Every conversion in this package (host to wire, wire to host, wire to CBOR objects and back) is a post-order fold over
a tree. The `visit` callback looks at a single node and either returns the converted value right away (leaves) or a
`Branch` with the children that must be converted first and a `build` callback that receives the converted children
in order.

>>> def visit(node):
...     if isinstance(node, list):
...         return Branch(node, tuple)
...     return node * 10
>>> walk([1, [2, 3], []], visit, max_depth=2)
(10, (20, 30), ())

The top-level value sits at depth 0, a branch at depth `d` is only accepted when `d < max_depth`:

>>> walk([[1]], visit, max_depth=1)
Traceback (most recent call last):
...
rcbor.exception.DepthExceededError: maximum nesting depth of 1 exceeded
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from rcbor.exception import DepthExceededError

N = TypeVar('N')
R = TypeVar('R')


@dataclass(slots=True, frozen=True)
class Branch(Generic[N, R]):
    children: Sequence[N]
    build: Callable[[list[R]], R]


def walk(root: N, visit: Callable[[N], Union[R, Branch[N, R]]], *, max_depth: int) -> R:
    """ Convert the tree rooted at `root`, raising `DepthExceededError` when branches nest too deep.

    This module's docstring has more details and examples.
    """
    results: list[R] = []
    # (is_exit, node or branch, depth)
    stack: list[tuple[bool, Any, int]] = [(False, root, 0)]
    while stack:
        is_exit, item, depth = stack.pop()
        if is_exit:
            count = len(item.children)
            children = results[len(results) - count:]
            del results[len(results) - count:]
            results.append(item.build(children))
            continue
        step = visit(item)
        if not isinstance(step, Branch):
            results.append(step)
            continue
        if depth >= max_depth:
            raise DepthExceededError(max_depth)
        stack.append((True, step, depth))
        stack.extend((False, child, depth + 1) for child in reversed(step.children))
    assert len(results) == 1
    return results[0]
