"""Classic textbook algorithms and elementary data structures."""

from .errors import (
    AlgorithmError,
    AlgorithmNotFoundError,
    InvalidRangeError,
    InvalidTypeError,
    SupersededCallError,
    VertexNotFoundError,
)
from .utils import Graph

from .strings.basic.reverse_string import reverse_string
from .strings.basic.palindrome import is_palindrome
from .strings.basic.char_frequency import char_frequency
from .strings.basic.anagram import is_anagram

from .numeric.basic.prime import is_prime
from .numeric.basic.factorial import factorial
from .numeric.basic.gcd import gcd
from .dynamic_programming.basic.fibonacci import fibonacci

from .searching.basic.two_sum import two_sum
from .searching.basic.binary_search import binary_search

from .sorting.basic.bubble_sort import bubble_sort
from .sorting.basic.quick_sort import filter_quick_sort, quick_sort
from .sorting.basic.merge_sorted import merge_sorted_arrays

from .arrays.basic.find_max import find_max

from .data_structures.basic.linked_list import LinkedList
from .data_structures.basic.stack import Stack
from .data_structures.basic.queue import Queue

from .graph.basic.dfs import dfs, dfs_iterative
from .graph.basic.bfs import bfs, bfs_shortest_path

from .timing.debounce import debounce, debounce_async

__version__ = "0.1.0"
