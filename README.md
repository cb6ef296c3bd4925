# arrayops

A small toolkit and command for working with lists of integers read from a text file.
It can:

- read one array per line, with numbers separated by spaces or commas;
- print the arrays;
- sort each array with its own quicksort rather than the built-in sort;
- find the elements that every array has in common;
- find the elements shared by the two longest arrays;
- build a list, in descending order, of the elements that occur exactly once across all arrays.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command line

Put your arrays in a file, one array per line:

```
5 4 4 2 -1 0
10, 15, -1, +0
5 4 15 2 3 0
```

Then run the command with the file's path:

```
arrayops arrays.txt
```

Without an argument it reads `input.txt` in the current directory:

```
arrayops
```

It prints the arrays under a `PrintArrays` heading, then the outcome of each step, each
under its own heading:

1. `ManualSortTransformer result`: every array sorted in ascending order;
2. `IntersectionTransformer result`: the values present in all arrays;
3. `IntersectionTransformer result`: the values present in both of the two longest arrays;
4. `UniqueReverseSortedTransformer result`: the values that occur exactly once across all
   arrays, in descending order.

The command exits with status 1 and a message on standard error if the file cannot be
opened, if a number cannot be parsed or lies outside the 32-bit signed range, or if the
file holds fewer than two arrays.

## Line format

Digits, `+` and `-` make up a number; a space or a comma ends it. Every other character
is ignored, so `10, 15, -1, +0` reads as `[10, 15, -1, 0]`.

## Library

The helpers in `arrayops.miscutils` work on plain Python lists:

```python
from arrayops.miscutils import (
    parse_line_to_numbers,
    intersection,
    unique_elements_from_arrays,
    remove_duplicates,
    count_elements,
    quick_sort,
    greater_than,
)

parse_line_to_numbers("10, 15, -1, +0")
# [10, 15, -1, 0]

intersection([[5, 4, 4, 2, -1, 0], [10, 15, -1, +0]])
# [-1, 0]

unique_elements_from_arrays([[5, 4, 4, 2, -1, 0], [10, 15, -1, +0, 4, 5, 100]])
# [2, 10, 15, 100]

remove_duplicates([9, 7, 4, 0, -1, 4, 9, 15, 0])
# [7, -1, 15]

count_elements([[5, 4, 4, 2, -1, 0, 0]])
# {-1: 1, 0: 2, 2: 1, 4: 2, 5: 1}

values = [9, 7, 4, 0, -1]
quick_sort(values, greater_than)
# values is now [9, 7, 4, 0, -1]
```

Note that `remove_duplicates` drops every value that occurs more than once rather than
keeping one copy, and `intersection` applies it to each array before comparing them.
`quick_sort` sorts in place and uses `less_than` when no comparison is given.

Other helpers in the same module are `read_arrays_from_file` (raises `OSError` if the file
cannot be opened), `print_arrays` (writes to standard output or to a given `file`) and
`custom_format` (joins a list, a list of lists or a mapping into space-separated text).

`arrayops.transformers` wraps the individual steps as transformers. `create_transformer`
takes a `Transformation` (`SORT`, `INTERSECT` or `UNIQUE_REVERSE_SORTED`) and returns a
`ManualSortTransformer`, an `IntersectionTransformer` or a
`UniqueReverseSortedTransformer`; anything else raises `ValueError`. Call `transform` on a
list of arrays, with `print_result=False` to keep it quiet, and read the outcome from the
`result` property. Results accumulate across repeated calls to `transform` on the same
transformer. `ManualSortTransformer` also sorts the arrays it is given in place.

```python
from arrayops.transformers import Transformation, create_transformer

transformer = create_transformer(Transformation.UNIQUE_REVERSE_SORTED)
transformer.transform([[5, 4, 4, 2, -1, 0], [5, 4, 15, 2, 3, 0]], print_result=False)
transformer.result
# [15, 3, -1]
```