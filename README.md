# drillbook

Support code for a course of small programming exercises: worked solutions
to many of the exercises as plain Python, coloured status lines for the
terminal, and a generator for the `rust-project.json` file that lets
rust-analyzer understand loose exercise files.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Lessons

`drillbook.lessons` holds the worked solutions, one module per topic:

- `quizzes`: `calculate_price_of_apples`, `transformer` with the commands
  `Uppercase`, `Trim` and `Append(count)`, and `ReportCard.report()`.
- `basics`: `bigger`, `foo_if_fizz`, `is_even`, `sale_price`.
- `conversions`: `byte_counter`, `char_counter`, `num_sq`, `average`, and
  `Person`, with `Person.from_text` (falls back to `Person.default()`) and
  `Person.parse` (raises `EmptyInputError`, `BadLenError`, `NoNameError` or
  `InvalidAgeError`, all subclasses of `ParsePersonError`).
- `colors`: `Color.from_components` and `Color.from_sequence`, raising
  `IntConversionError` or `ColorBadLenError` (both `IntoColorError`).
- `errors`: `generate_nametag_text`, `total_cost`, `spend_tokens`,
  `PositiveNonzeroInteger` (raises `NegativeError` or `ZeroError`) and
  `parse_pos_nonzero` (raises `ParsePosNonzeroError` with the `cause`).
- `strings`: `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`.
- `options`: `maybe_icecream`.
- `iterators`: `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide` (raises `NotDivisibleError` or
  `DivideByZeroError`), `result_with_list`, `list_of_results`, `factorial`,
  the `Progress` enum with `count_for`, `count_iterator`,
  `count_collection_for`, `count_collection_iterator`, and `vec_loop`,
  `vec_map`.
- `structs`: `Order` and `create_order_template`, `Package` with
  `is_international` and `get_fees`, and `ProcessState.process` driven by
  the messages `ChangeColor`, `Echo`, `Move(Point)` and `Quit`.
- `traits`: `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`,
  `compare_license_types`, and the generic `Wrapper`.
- `pointers`: the cons list `Cons` with `create_empty_list` and
  `create_non_empty_list`, and the clone-on-write `Cow` with `abs_all`.

```python
from drillbook.lessons.conversions import Person

Person.parse("Mark,20")        # Person(name='Mark', age=20)
Person.from_text("Mark,")      # Person(name='John', age=30)
```

## Terminal output

`drillbook.ui.warn(message)` and `drillbook.ui.success(message)` print a
marked line, red or green when standard output is a terminal. Set
`NO_EMOJI` in the environment (`drillbook.ui.no_emoji()` checks it) to get
`!` and `✓` instead of emoji.

## rust-analyzer project file

`drillbook.project.RustAnalyzerProject` collects one `Crate` per `.rs`
file and writes them as JSON:

```python
from drillbook.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()            # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

## What it does not do

There is no command-line program. drillbook does not read an `info.toml`
exercise list, does not compile, run, test or verify exercises, does not
track which exercises are done, and has no watch mode, hints or reset.

## Tests

```
pip install .[test]
pytest
```