# iristerm

Building blocks for a terminal emulator. It is plain Python and has no
dependencies.

- `iristerm.cell`: `Cell`, `CellAttrs`, `Color` (default, ANSI, indexed or
  RGB), `CellFlags` and `CellWidth`. A wide character, such as CJK, is
  classed as `CellWidth.DOUBLE` and takes two columns.
- `iristerm.cursor`: `Cursor`, which holds a position and moves only within
  the bounds it is given. Also `CursorStyle`, and save/restore through
  `SavedCursor`.
- `iristerm.damage`: `DamageTracker` records which rows and columns changed
  since the last `take()`. It reports them as `DamageRegion` values.
- `iristerm.modes`: `Mode` maps ANSI and DEC private mode parameters to
  modes. `TerminalModes` holds the mode flags.
- `iristerm.grid`: `Grid` is a fixed-size grid of cells. It supports:
  - writes that keep wide characters consistent;
  - ASCII runs written with `write_ascii_run`;
  - scrolling of the whole grid or of a row range;
  - inserting and deleting cells;
  - clearing;
  - resizing that keeps the top-left content.
- `iristerm.errors`: `IrisError` and its subclasses.
- `iristerm.parser`: an incremental ANSI/VT parser that turns bytes into
  actions.
  - `parser.machine`: `Parser`, `ParserConfig` and `ParserState`.
  - `parser.actions`: the action classes, and `parse_sgr`.
  - `parser.csi`: `parse_csi`.
  - `parser.control`: `parse_control`.
  - `parser.payloads`: `parse_osc` and `parse_dcs`.
  - `parser.charset`: `Charset`, with ASCII, UK and DEC special graphics.
  - `parser.utf8`: helpers for UTF-8 decoding.

## Installation

```
pip install iristerm
```

## Parsing a byte stream

```python
from iristerm.parser.machine import Parser
from iristerm.parser.actions import Print, CursorPositionAction

parser = Parser()
actions = parser.parse(b"\x1b[12;24HA")
assert actions == [CursorPositionAction(row=12, col=24), Print("A")]
```

The parser keeps its state between `parse` calls. An incomplete escape
sequence or UTF-8 character carries over to the next call. `Parser.state()`
reports the current state. `Parser.reset()` drops any partial sequence and
returns the parser to the ground state.

The parser handles the following:

- **C0 controls.** These are carried out even when they appear inside a
  sequence.
- **CAN and SUB.** Either byte cancels the sequence in progress.
- **CSI sequences.** These cover cursor movement, erasing, scrolling and
  tab stops. SGR parameters become `SetGraphicsRendition`. Set and reset
  mode parameters become `SetModes` and `ResetModes`. `CSI b` repeats the
  last printed character.
- **OSC strings.** Window titles (commands 0 and 2) and hyperlinks
  (command 8) are recognised. A string ends with BEL or ST.
- **DCS strings.** These are consumed but produce no actions.
- **SOS, PM and APC strings.** These are skipped.
- **Charsets.** G0 to G3 can be designated, with shift in, shift out and
  single shifts.
- **Invalid UTF-8.** It is printed as U+FFFD.

`ParserConfig` limits the number of CSI parameters and the size of OSC, DCS
and ignored strings. When a string grows past its limit it is dropped, and
parsing continues from the current byte.

## Working with the grid

```python
from iristerm.grid import Grid, GridSize
from iristerm.cell import Cell, CellAttrs

grid = Grid(GridSize(rows=3, cols=4))
grid.write(1, 2, Cell.from_char("A", CellAttrs()))
regions = grid.take_damage()   # [DamageRegion(start_row=1, end_row=1, start_col=2, end_col=2)]
grid.scroll_up(1)
```

The grid raises these errors:

- `InvalidPositionError` for a position outside the grid.
- `InvalidAsciiRunError` when `write_ascii_run` is given a byte that is not
  printable ASCII.
- `ResizeFailedError` when the requested size has a negative dimension.

Indexing a grid by row (`grid[row]`) returns a copy of that row. It raises
`IndexError` when the row does not exist.

## What this package does not do

The parser produces actions, but nothing in the package applies them to a
`Grid`, `Cursor` or `TerminalModes`. That work is left to the caller. The
package has no:

- screen rendering;
- pseudo-terminal or process handling;
- keyboard input;
- scrollback;
- command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```