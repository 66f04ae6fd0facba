# blocktris

Terminal building blocks for a falling-block puzzle game: console control
and key reading, painters and printers that draw text shapes at screen
positions, selectable menu elements, scenes and a director that runs them,
score keeping, and plain-text storage for scores, local users and saved
servers. It has no dependencies outside the standard library.

## Installing

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## What is in the package

- `blocktris.console`: `Console` writes ANSI colour, cursor and screen
  sequences to a stream; `Color` and `Key` name colours and key codes;
  `KeyReader` is a non-blocking key reader (a context manager that puts the
  terminal into cbreak mode); `translate_key` maps a raw key sequence to a
  key code; `Timer` measures milliseconds since its last reset.
- `blocktris.painting`: `Painter` and `ColorPainter` draw a multi-line
  shape as one "point" and build lines, boxes and filled rectangles of it;
  `blank_painter` gives a block of blanks for erasing.
- `blocktris.printing`: `Printer` and `ColorPrinter` print lines of text
  aligned inside a box (`AlignX`, `AlignY`).
- `blocktris.widgets`: `Scanner`, a one-line text field; `Canvas`, painters
  fixed at positions with an optional update hook; `NoticeToast` and
  `InputToast`, modal boxes that wait for Enter.
- `blocktris.ui`: `UIElement`, a boxed element holding children on a grid
  with arrow-key selection and space to finish; `UIListElement`, a scrolling
  list; `UIScannerElement`, a boxed text field whose state is what was typed.
- `blocktris.scenes`: `Director` builds scenes by name and runs them in
  turn until one returns an empty name; `UIScene`, `FunctionScene` and
  `SingleModeGameScene`.
- `blocktris.artwork`: `tetris_canvas`, `score_canvas` and
  `developer_canvas`, large coloured block-letter headings.
- `blocktris.scoring`: `ScoreManager` and the `ScoreBoard` panel that
  shows level, score, lines and blocks.
- `blocktris.records`: `SingleScore`, `SingleUser` and `ServerInfor` with
  their line-based stores and managers.
- `blocktris.storage`: `FileManager` and the `Dao` base class.
- `blocktris.message`: `to_message` and `to_object` for `key:value/...`
  messages.
- `blocktris.client`: `Client`, a TCP client sending fixed-size
  `query/data` requests.
- `blocktris.checks`: `CheckRunner`, a small console check runner.
- `blocktris.textutil`: `split`, `text_width`, `new_id` and `ProgramError`.

## Examples

Scoring: each placed block earns the level in points, each cleared line ten
times the level, and clearing several lines at once earns a bonus of ten
times the level for every line after the first. Every five lines raise the
level.

```python
from blocktris.painting import ColorPainter
from blocktris.scoring import ScoreBoard, ScoreManager

manager = ScoreManager(ScoreBoard(34, ColorPainter(["·"])))
manager.add_blocks(1)
manager.add_lines(2)
print(manager.score, manager.lines, manager.level)  # 31 2 1
```

A score table kept best first in a text file, one `score/name/date` entry
per line:

```python
from blocktris.records import SingleScore, SingleScoreDao, SingleScoreManager, current_date
from blocktris.storage import FileManager

table = SingleScoreManager(SingleScoreDao(FileManager("single mode score.txt")))
table.insert(SingleScore("alice", current_date(), 120))
print([entry.name for entry in table.data])
```

Saved servers work the same way with `ServerInforManager`, which refuses a
name that is already stored by raising `ProgramError`.

Messages:

```python
from blocktris.message import to_message, to_object

to_message({"name": "alice", "score": "120"})  # 'name:alice/score:120'
to_object("name:alice/score:120")              # {'name': 'alice', 'score': '120'}
```

## What the package does not do

- It has no game command and no playable game: the falling pieces, the
  board they land on, line clearing, the hold slot and the next-piece
  preview are not part of it. `SingleModeGameScene` runs a game object that
  you provide (one with `draw`, `width`, `update`, `ended`, `score` and the
  movement methods).
- It has no server. `Client` can talk to a server that answers fixed-size
  `query/data` requests, but none is included, and there is no store for
  multiplayer users.