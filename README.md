# dsakit

Classic algorithm exercises as plain, tested Python functions. The package has
hashing problems, number utilities, recursive routines, a bounded stack and
string manipulations. It has no runtime dependencies.

## Installation

```
pip install dsakit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.hashing`

- `three_sum(nums)`: every distinct triplet that sums to zero, as sorted
  tuples, in the order they are first found.
- `find_duplicate(nums)`: the repeated value, found with Floyd's cycle
  detection. Every value must be a valid index into `nums`; otherwise
  `ValueError` is raised.
- `find_repeat_and_missing(grid)`: `(repeated, missing)` for a square grid
  meant to hold `1..n*n`. Raises `ValueError` if the grid is not square or has
  no repeated value.
- `two_sum(nums, target)`: `(i, j)` with `j < i` and
  `nums[i] + nums[j] == target`. Raises `ValueError` when no pair exists.

```python
from dsakit.hashing import three_sum, two_sum

three_sum([-1, 0, 1, 2, -1, -4])   # [(-1, 0, 1), (-1, -1, 2)]
two_sum([5, 2, 11, 7, 15], 9)      # (3, 1)
```

### `dsakit.maths`

- `is_armstrong(n)`: whether the sum of the cubes of the digits equals `n`.
- `is_prime(n)`: primality by trial division.
- `digits(n)`, `count_digits(n)`, `sum_digits(n)`: digits taken from least to
  most significant. Digits of a negative number are negative, and zero has no
  digits.
- `gcd(a, b)` and `lcm(a, b)`: `lcm` raises `ZeroDivisionError` when the gcd
  is zero.
- `is_palindrome_number(n)`: whether `n` reads the same reversed.
- `reverse_number(n)`: reverses a 32-bit signed integer. It returns 0 when the
  result would overflow, and raises `ValueError` if `n` is outside that range.

```python
from dsakit.maths import gcd, lcm, reverse_number

gcd(20, 28)            # 4
lcm(20, 28)            # 140
reverse_number(6789)   # 9876
```

### `dsakit.recursion`

- `subsets(items)`: a generator of every subset. Each item is included before
  it is excluded.
- `binary_search(items, target)`: an index of `target` in a sorted sequence,
  or `None`.
- `factorial(n)` and `sum_to_n(n)`: both raise `ValueError` for negative `n`.
- `fibonacci(n)`: the `n`-th Fibonacci number, with `F(0) = 0`.
- `fibonacci_sequence(n)`: the first `n` Fibonacci numbers.
- `is_sorted(items)`: whether the sequence is in non-decreasing order.
- `permutations(items)`: a generator of every permutation, produced by
  swapping items into place.
- `count_down(n)`: the list `[n, n-1, ..., 1]`. Requires `n >= 1`.

```python
from dsakit.recursion import binary_search, permutations

binary_search([-1, 0, 3, 5, 9, 12, 14], 9)   # 4
list(permutations([1, 2, 3]))
# [[1, 2, 3], [1, 3, 2], [2, 1, 3], [2, 3, 1], [3, 2, 1], [3, 1, 2]]
```

### `dsakit.stack`

`BoundedStack(capacity=10)` is a last-in, first-out stack. It has `push`,
`pop`, `peek`, `is_empty` and `is_full`, supports `len()`, and iterates from
top to bottom. Pushing onto a full stack raises `StackOverflowError`, a
subclass of `OverflowError`. Popping or peeking an empty stack raises
`StackUnderflowError`, a subclass of `IndexError`.

`is_valid_parentheses(text)` checks that brackets are closed in the right
order. Any character that is not an opening bracket is treated as a closing
one, so other characters make the text invalid.

```python
from dsakit.stack import BoundedStack, is_valid_parentheses

stack = BoundedStack(10)
stack.push(10)
stack.push(20)
stack.pop()      # 20
stack.peek()     # 10

is_valid_parentheses("({[]}[])")   # True
```

### `dsakit.text`

- `remove_occurrences(s, part)`: repeatedly removes the leftmost occurrence of
  `part`. An empty `part` raises `ValueError`.
- `reverse_string(s)`: `s` reversed.
- `reverse_words(s)`: the space-separated words in reverse order, with extra
  spaces dropped.
- `compress(chars)`: run-length encoding as a list of characters. Runs of a
  single character keep just the character.
- `is_palindrome(s)`: compares only ASCII letters and digits, ignoring case.

```python
from dsakit.text import compress, remove_occurrences, reverse_words

remove_occurrences("daabcbaabcbc", "abc")   # "dab"
reverse_words("the sky is blue")            # "blue is sky the"
compress("aabbccde")                        # ['a', '2', 'b', '2', 'c', '2', 'd', 'e']
```

## What it does not do

dsakit is a library only. It has no command-line program, and its functions
return their results rather than printing them.