# algobox

Classic algorithms and small data structures, written as plain Python with
no third-party dependencies. It suits teaching, self-study, and any small
job that needs one of these routines.

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `heap_sort`, `quick_sort`, `bubble_sort`, `insertion_sort`, `selection_sort` |
| `algobox.searching` | `binary_search` (on ascending input), `linear_search` |
| `algobox.sequences` | `factorial`, `fibonacci`, `fibonacci_series` |
| `algobox.primes` | `is_prime` (trial division), `atkin_primes` (sieve of Atkin) |
| `algobox.arithmetic` | `gcd`, `hcf`, `is_armstrong`, `is_leap_year`, `swap`, `product`, `square_all`, `evaluate_polynomial`, `solve_quadratic` with `RootKind` and `QuadraticRoots`, `ascii_code` |
| `algobox.geometry` | `area` together with the `Shape` enumeration and the constant `PI` |
| `algobox.weekday` | `validate_date`, `weekday_number`, `weekday_name`, `InvalidDateError`, `DAY_NAMES` |
| `algobox.expressions` | `precedence`, `infix_to_postfix` |
| `algobox.containers` | `Stack`, `ArrayQueue`, `ContainerFullError`, `ContainerEmptyError` |
| `algobox.matrix` | `multiply_matrices`, `MatrixShapeError` |
| `algobox.tree` | `Node`, with `preorder`, `inorder` and `postorder` generators |

## Behaviour worth knowing

- Every sort accepts any iterable and returns a new ascending list; the input
  is left untouched.
- `binary_search` and `linear_search` return an index, or `None` when the key
  is absent.
- `fibonacci(n)` numbers terms from 1, so `fibonacci(1) == 0` and
  `fibonacci(2) == 1`. `fibonacci_series(count)` returns the first `count`
  terms. Negative arguments raise `ValueError`, as does `factorial` of a
  negative number.
- `atkin_primes(limit=100000)` returns the primes below `limit`.
- `gcd` works by repeated subtraction and requires two positive integers;
  `hcf` uses Euclid's algorithm and returns 0 if either argument is 0.
- `square_all(values)` returns a pair: the list of squares and their sum.
- `evaluate_polynomial(coefficients, x)` takes coefficients from the constant
  term upwards.
- `solve_quadratic(a, b, c)` returns a `QuadraticRoots` whose `kind` is a
  `RootKind` (`REAL`, `REPEATED` or `IMAGINARY`) and whose `roots` holds the
  real roots found (none for imaginary roots). `a == 0` raises `ValueError`.
- `area(shape, *dimensions)` uses `PI = 3.14` for circles. Triangles take a
  base and height, rectangles a length and breadth, rhombuses both diagonals,
  and squares, regular pentagons and hexagons a side. A wrong number of
  dimensions raises `TypeError`.
- `weekday_name(day, month, year)` accepts years 1800 to 2999 and raises
  `InvalidDateError` (a `ValueError`) for anything else or for a day that
  does not exist. `weekday_number` returns 0 for Monday through 6 for Sunday.
- `infix_to_postfix` takes single-letter operands and the operators
  `^ $ * / % + -` with parentheses; whitespace is ignored, and unknown
  operators or unbalanced parentheses raise `ValueError`.
- `Stack` is unbounded unless given a `capacity`; `ArrayQueue(capacity)` is
  always bounded. Adding to a full container raises `ContainerFullError`;
  taking from an empty one raises `ContainerEmptyError`.
- `multiply_matrices` takes lists of rows and raises `MatrixShapeError` for
  ragged matrices or incompatible shapes.

## Examples

```python
from algobox.sorting import quick_sort
from algobox.searching import binary_search
from algobox.sequences import factorial
from algobox.arithmetic import gcd, is_leap_year
from algobox.expressions import infix_to_postfix

ordered = quick_sort([5, 2, 9, 1])  # [1, 2, 5, 9]
binary_search(ordered, 9)           # 3

factorial(5)                # 120
gcd(12, 18)                 # 6
is_leap_year(2000)          # True
infix_to_postfix("a+b*c")   # "abc*+"
```

Containers raise exceptions rather than printing messages:

```python
from algobox.containers import Stack, ContainerEmptyError

stack = Stack()
stack.push(3)
stack.push(7)
stack.peek()    # 7
stack.pop()     # 7
stack.pop()     # 3
try:
    stack.pop()
except ContainerEmptyError:
    ...
```

Days of the week:

```python
from algobox.weekday import weekday_name

weekday_name(1, 1, 2024)    # "Monday"
```

Tree traversals are generators:

```python
from algobox.tree import Node, inorder

root = Node(2, Node(1), Node(3))
list(inorder(root))         # [1, 2, 3]
```

## What this package does not do

algobox is a library only. It has no command-line program and no
interactive prompts or menus: every routine takes its inputs as arguments
and returns its results. It does not draw shapes on screen.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.