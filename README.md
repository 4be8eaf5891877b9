# chatwrapped

Building blocks for a "year in review" of an exported group chat log: reading
the many timestamp styles that chat exports use, normalising the lines of an
export, per-sender statistics queries over an SQLite database, and a handful
of tongue-in-cheek award cards handed out to members of the group.

## Installation

```
pip install chatwrapped
```

To run the test suite:

```
pip install "chatwrapped[test]"
pytest
```

## Modules

| Module                  | Purpose                                                           |
|-------------------------|-------------------------------------------------------------------|
| `chatwrapped.timeparse` | `parse_flexible` and `DateParseError`                             |
| `chatwrapped.rawlines`  | normalising export lines and storing them in a `rawest` table      |
| `chatwrapped.queries`   | single statistics queries, raising `QueryError` on failure         |
| `chatwrapped.stats`     | `get_stats` gathers the queries into one `Stats` record            |
| `chatwrapped.cards`     | `assign_cards` hands out award `Card`s                            |

## Timestamps

`parse_flexible(text)` returns an aware UTC `datetime`. Commas are ignored.
Three layouts are read directly:

```python
from chatwrapped.timeparse import parse_flexible, DateParseError

parse_flexible("6.09.25, 15:00:00")      # day.month.year
parse_flexible("06/09/2025 15:00:00")    # day first when the year has four digits
parse_flexible("9/6/25, 3:00:00 PM")     # otherwise month first, unless the first field is over 12
```

Two-digit years are read as 20xx, and days or months past the end of their
range roll over into the following ones. The time may be 24-hour or 12-hour
with `AM`/`PM`. Anything else is handed to `dateutil`'s parser, with times
that carry no zone read as local time. Text that cannot be read raises
`DateParseError` (a `ValueError`):

```python
try:
    parse_flexible("not a date")
except DateParseError as exc:
    print(exc)
```

## Preparing a log

`normalize_line(line)` removes the invisible direction marks (U+200E) and
narrow no-break spaces (U+202F) that some exporters insert, and rewrites a
leading bracketed timestamp into one sortable form, `yy.mm.dd, HH:MM:SS`.
Lines without a leading timestamp (continuations of multi-line messages) are
returned with only the invisible characters removed. A timestamp that cannot
be parsed raises `DateParseError`.

```python
from chatwrapped.rawlines import normalize_line

normalize_line("[6.09.25, 15:00:00] Ana: hi")
# '[25.09.06, 15:00:00] Ana: hi'
```

- `normalize_lines(lines)` normalises an iterable of lines into a list.
- `read_raw_lines(path)` reads a UTF-8 export file and returns its normalised
  lines, without line terminators.
- `load_raw_lines(conn, lines)` replaces the `rawest` table of an `sqlite3`
  connection with one row per line (column `line`), carriage returns trimmed.

```python
import sqlite3
from chatwrapped.rawlines import read_raw_lines, load_raw_lines

conn = sqlite3.connect("chat.db")
load_raw_lines(conn, read_raw_lines("chat.txt"))
```

## Statistics

The queries in `chatwrapped.queries` run against these tables of an
`sqlite3` connection:

- `chat` – one row per message, with a `msg_sender` column
- `conversations` – with a `conversation_id` column
- `images`, `videos`, `audios`, `stickers` – one row per item, with a
  `msg_sender` column

| Function                     | Returns                                              |
|------------------------------|------------------------------------------------------|
| `total_messages(conn)`       | number of rows in `chat`                             |
| `messages_per_person(conn)`  | `SenderCount`s from `chat`, busiest first            |
| `media_counter(conn, media)` | `SenderCount`s from the named table, largest first   |
| `conversation_count(conn)`   | number of distinct `conversation_id`s                |

Each raises `QueryError` when the database reports an error, for instance when
a table is missing. `SenderCount`, `TopEmoji` and `Couple` are frozen
dataclasses.

`get_stats(conn)` runs all of them and returns a `Stats` record; a query that
fails leaves its field at the empty default instead of stopping the report.
`Stats.to_dict()` gives a JSON-ready mapping with the keys `totalMessages`,
`messagesPerPerson`, `top3emojis`, `imagesPerPerson`, `videosPerPerson`,
`AudioPerPerson`, `stickersPerPerson`, `totalConversations` and `couple`.

```python
import json
from chatwrapped.stats import get_stats

print(json.dumps(get_stats(conn).to_dict()))
```

## Award cards

`assign_cards(stats, opener=None, bot=None, jester=None, basic=None, rng=None)`
builds candidate cards from a `Stats` record and the optional measurements
passed in (`opener` and `jester` as `(name, count)` pairs, `bot` and `basic`
as `(name, average)` pairs):

| Card         | Awarded to                                                  | Value                 |
|--------------|-------------------------------------------------------------|-----------------------|
| `GRANDMA`    | the sender with most stickers (if any)                      | sticker count         |
| `OPENER`     | the `opener` name                                           | its count             |
| `BOT`        | the `bot` name                                              | average, rounded      |
| `JESTER`     | the `jester` name                                           | its count             |
| `LURKER`     | the last entry of `messages_per_person`                     | its message count     |
| `SPAMMER`    | the sender with most images, videos and audio (if any)      | media count           |
| `CORE`       | the first entry of `messages_per_person`                    | its message count     |
| `BASICBITCH` | the `basic` name, only when the average is above 2          | average, rounded      |
| `TIMECHEESE` | a rare random drop (1 in 10000 per member)                  | 0                     |

The candidates are shuffled with `rng` (a `random.Random` by default; pass a
seeded one for reproducible results). Members are then taken in
`messages_per_person` order and each gets the first unused candidate card
awarded to them, if there is one. No card type is given twice, and no more
than five cards, nor more cards than there are members, are handed out.
`assign_cards` raises `ValueError` when `messages_per_person` is empty.
`CARD_TYPES` lists the eight non-random card types, and `Card.to_dict()`
gives `person`, `type` and `value`.

## What the package does not do

- It has no command-line program; it is used as a library.
- It does not turn the `rawest` lines into the `chat`, `conversations` and
  media tables; those have to be filled by the caller before the statistics
  queries can run.
- It does not compute the top emojis or the chattiest pair: `get_stats`
  leaves `top3emojis` empty and `couple` at its blank default.
- It does not measure conversation openers, words per message, laughing
  emojis or "hey" lengths; `assign_cards` takes those results as arguments.