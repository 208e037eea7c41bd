# fluentkit

This package provides building blocks for Fluent-style user interfaces. It does
not depend on any GUI toolkit. It holds state and works out geometry and
colours. Your own toolkit does the drawing. The package has no dependencies
outside the standard library.

## Modules

- `fluentkit.observable` provides these types:
  - `Signal` has `connect`, `disconnect` and `emit`.
  - `Observable` has `signal(name)`, which returns a named signal and creates
    it on first use.
  - `Property` is a descriptor. When you assign a `Property` attribute, the
    object's `<name>_changed` signal is emitted.
- `fluentkit.color` provides `Color`, a frozen RGBA value:
  - `rgba()` returns the colour packed as 0xAARRGGBB, and `Color.from_rgba`
    does the reverse.
  - `name` returns `#rrggbb`.
  - `with_opacity(color, opacity)` returns the colour with its alpha replaced.
- `fluentkit.colors` holds the stock palette:
  - `Colors` has the greys `grey10` to `grey220`, plus `black`, `white` and
    `transparent`.
  - It also has `AccentColor` ramps, each with seven shades from `darkest` to
    `lightest`: `yellow`, `orange`, `red`, `magenta`, `purple`, `blue`, `teal`
    and `green`.
  - `default_colors()` returns one shared instance.
  - `create_accent_color(primary)` builds a ramp from a single colour by
    changing its opacity.
- `fluentkit.textstyle` holds the type ramp:
  - `TextStyle` has the fonts `caption`, `body`, `body_strong`, `subtitle`,
    `title`, `title_large` and `display`. They are `Font` values that share one
    family.
  - `default_family()` picks the family for each platform.
- `fluentkit.theme` provides `Theme` and `DarkMode` (`SYSTEM`, `LIGHT`, `DARK`):
  - A theme recomputes its derived colours when `dark_mode` or `accent_color`
    changes, or when the system appearance changes. The derived colours are
    `primary_color`, `background_color`, the font, frame and item colours, and
    others.
  - `set_system_dark(value)` reports the system appearance.
  - `is_system_dark(window_color)` decides from a window colour's luminance
    whether the system appearance is dark.
- `fluentkit.captcha` provides `Captcha` and `generate_code(rng)`:
  - `Captcha` holds a random four-character code made of digits and upper- and
    lower-case letters.
  - `refresh()` draws a new code.
  - `verify(code)` checks an answer. It ignores case if `ignore_case` is set.
- `fluentkit.rectangle` provides `Rectangle`:
  - It takes one radius per corner and an optional border with a `PenStyle`.
  - `outline(width, height)` returns the outline as a list of `MoveTo`,
    `LineTo` and `ArcTo` commands.
  - `border_valid()` says whether a border is drawn.
- `fluentkit.watermark` provides `Watermark`. `tiles(width, height, text_width,
  text_height)` places the rotated text across an area and returns `Tile`
  centres and angles.
- `fluentkit.table_model` provides `TableModel`:
  - Rows are dicts, and `column_source` is a list of column descriptions.
  - The row operations are `insert_row`, `append_row`, `set_row`, `get_row`,
    `remove_row` and `clear`.
  - Each change emits one of these signals: `rows_inserted`, `rows_removed`,
    `data_changed` or `model_reset`.
- `fluentkit.sort_proxy` provides `TableSortProxyModel`, a filtered and sorted
  view of a `TableModel`:
  - The filter is called with a source row index.
  - The comparator is called with two source row indices.
  - Each call to `set_comparator` flips `sort_order`.
  - Row operations take proxy indices and map them to the source model.
- `fluentkit.tree_model` provides `TreeModel` and `TreeNode`:
  - The tree is built from nested mappings with `children` lists.
  - It is shown as a flat list of visible rows.
  - The operations are `expand`, `collapse`, `all_expand`, `all_collapse`,
    `check_row` and `selection_model`.
- `fluentkit.tools` holds helpers:
  - Hashing: `md5`, `sha256`.
  - Base64: `to_base64`, `from_base64`.
  - UUIDs: `uuid`.
  - Files: `read_file`, `remove_file`, `remove_dir`.
  - `file:` URLs: `to_local_path`, `get_url_by_file_path`,
    `get_file_name_by_url`.
  - HTML to plain text: `html_to_plain_text`.
  - Platform checks: `is_win`, `is_linux`, `is_macos`,
    `is_windows10_or_greater`, `is_windows11_or_greater`,
    `window_build_number`.
  - `image_main_color(image, bright)` averages every 20th pixel of a grid of
    pixels.
  - `show_file_in_folder` and `get_wallpaper_file_path` ask the desktop. To do
    that they start platform programs: `explorer.exe`, `xdg-open`,
    `osascript`, `gsettings` or `dbus-send`.

## Installation

```
pip install .
```

## Examples

Switch the theme to dark and read the new primary colour:

```python
from fluentkit.colors import default_colors
from fluentkit.theme import Theme, DarkMode

theme = Theme(default_colors(), system_dark=False)
theme.dark_mode = DarkMode.DARK
print(theme.primary_color)  # the blue ramp's "lighter" shade
```

Sort a table through a proxy:

```python
from fluentkit.table_model import TableModel
from fluentkit.sort_proxy import TableSortProxyModel

model = TableModel()
model.append_row({"name": "b"})
model.append_row({"name": "a"})

proxy = TableSortProxyModel(model)
proxy.set_comparator(lambda left, right: model.get_row(left)["name"] < model.get_row(right)["name"])
print(proxy.get_row(0))  # {'name': 'b'}
```

Collapse a tree node:

```python
from fluentkit.tree_model import TreeModel

tree = TreeModel()
tree.set_data_source([{"title": "root", "children": [{"title": "leaf"}]}])
tree.collapse(0)
print(tree.row_count())  # 1
```

## What it does not do

- It draws nothing. `Rectangle`, `Watermark` and `Captcha` only give geometry,
  positions and codes.
- It does not create or manage windows.
- It does not register global hotkeys, render QR codes or load translations.
- `Theme` does not watch the system appearance or the wallpaper by itself:
  - Call `set_system_dark` when the appearance changes.
  - Call `check_update_desktop_image` when you want `desktop_image_path`
    updated. It only updates the path while `blur_behind_window_enabled` is
    set.

## Running the tests

```
pip install ".[test]"
pytest
```