# algobox

A collection of classic algorithms and data structures, plus a handful of
small terminal programs, written as plain importable Python. It is meant for
reading, experimenting and practising. It has no runtime dependencies.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `merge_sort`, `quick_sort`, `selection_sort`, `bubble_sort`, `heap_sort`, `insertion_sort` (each returns a new list), `is_sorted`, `format_array` |
| `algobox.searching` | `binary_search`, `exponential_search`, `fibonacci_search`, `jump_search`, `linear_search` |
| `algobox.arrays` | Moore's voting (`find_candidate`, `majority_element`) and Kadane's `max_subarray_sum` |
| `algobox.strings` | `min_steps_to_anagram`, `is_palindrome` (case-insensitive) |
| `algobox.numbers` | `is_buzz_number`, `is_prime`, `primes_up_to`, `reverse_number`, `factorial`, `factorial_iterative`, `fibonacci`, `sum_natural`, `gcd`, `tower_of_hanoi` (a generator of `(disk, from_rod, to_rod)` moves) |
| `algobox.calculator` | `Operator` enum and `calculate` |
| `algobox.linked_lists` | `LinkedList`, `ListNode`, `MultilevelNode`, `flatten`, `reverse_list`, `swap_pairs`, `from_values`, `to_values` |
| `algobox.containers` | `Queue`, a bounded `Stack` (capacity 100 by default), `EmptyContainerError` |
| `algobox.trees` | `TreeNode`, `preorder`/`inorder`/`postorder` generators, `height`, `is_balanced`, `is_mirror`, `is_symmetric`, `max_width`, `count_in_range`, `search` |
| `algobox.graphs` | `Graph` (undirected, vertices `0 .. n-1`) with `add_edge`, `neighbours`, `bfs` and `dfs`; `dijkstra` (nodes `1 .. n`) and `format_distances` |
| `algobox.knapsack` | 0/1 `knapsack` and `fractional_knapsack` with `Item` |
| `algobox.queens` | `eight_queens`, `NQueensSolver` (boards up to 20), `format_board` |
| `algobox.sudoku` | `solve_sudoku` (returns a solved copy or `None`), `is_safe`, `format_grid` |
| `algobox.matrix` | `multiply`, `add`, `format_matrix`, `MatrixShapeError` |
| `algobox.spellcheck` | `spellcheck`, `devowel` |
| `algobox.maze` | `Maze` with `generate` (randomised depth-first search), `solve` and `render` |
| `algobox.hexagon` | `hexagon_lines` |
| `algobox.tictactoe` | `Board`, `InvalidMoveError` |
| `algobox.games` | `GuessingGame`, `GuessResult`, `rock_paper_scissors`, `Outcome` |
| `algobox.hospital` | `Hospital`, `Patient`, `HospitalFullError` — a severity-ordered waiting list |
| `algobox.records` | `RecordStore`, `Record`, `RecordError` — a record manager saved to a tab-separated file |
| `algobox.report` | `Student`, `calculate_grade`, `format_report` |
| `algobox.todo` | `TodoList`, `TodoListFullError` |

## A few examples

```python
from algobox.sorting import merge_sort
from algobox.searching import binary_search
from algobox.strings import min_steps_to_anagram
from algobox.knapsack import Item, fractional_knapsack, knapsack

merge_sort([64, 34, 25, 12, 22, 11, 90, 5])
# [5, 11, 12, 22, 25, 34, 64, 90]

binary_search([2, 5, 8, 12, 16, 23, 38, 56, 67, 78], 23)
# 5

min_steps_to_anagram("leetcode", "practice")
# 5

knapsack(50, [10, 20, 30], [60, 100, 120])
# 220

fractional_knapsack(50, [Item(60, 10), Item(100, 20), Item(120, 30)])
# 240.0
```

Searches return `None` when the target is not present. Containers such as
`Queue` and `Stack` raise `EmptyContainerError` when there is nothing to
take, and `Stack.push` raises `OverflowError` when the stack is full.
`Hospital.treat` and `TodoList.remove` raise `IndexError` when there is
nothing to treat or the task number is out of range.

## Command-line programs

Installing the package adds these commands:

| Command | What it does |
| --- | --- |
| `algobox-sort 5 3 9 1` | Sorts the integers given, or read from standard input; `-a/--algorithm` picks `merge` (default), `quick`, `selection`, `bubble`, `heap` or `insertion` |
| `algobox-palindrome racecar` | Tells whether a word is a palindrome; prompts if no word is given |
| `algobox-prime 29` | Tells whether a number is prime |
| `algobox-sieve 50` | Lists the primes up to a number |
| `algobox-calc` | A two-number calculator; the operator and numbers may also be given as arguments |
| `algobox-dijkstra` | Reads `nodes edges`, then `u v weight` per edge, then the start node from standard input, and prints shortest distances |
| `algobox-maze 11 21` | Generates a random maze and solves it; `--seed` makes it repeatable |
| `algobox-hexagon 4` | Draws a hexagon of stars |
| `algobox-tictactoe` | Two-player tic-tac-toe |
| `algobox-guess` | Guess a number between 1 and 100; `--seed` fixes the number |
| `algobox-rps` | One round of rock, paper, scissors against the computer; `--seed` fixes its choice |
| `algobox-hospital` | Hospital waiting list, most severe patient first |
| `algobox-records` | Add, list, update, delete, search, sort and save records; `--file` names the data file (default `db.txt`) |
| `algobox-report` | Student marks report with grades |
| `algobox-todo` | A to-do list |

## What it does not do

Only `algobox-records` keeps anything between runs. The hospital waiting
list, the to-do list and the student report live in memory and are gone when
the program exits. The games are played in the terminal only; there is no
computer opponent for tic-tac-toe.