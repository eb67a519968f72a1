# zalo

Building blocks for highlighting code the way VSCode does: compact
TextMate scopes, VSCode theme loading and compilation, theme selector
matching, CSS generation for class-based theming, and the options types a
highlighter and its renderers work with.

The package has no dependencies beyond the standard library.

## Installation

```
pip install zalo
```

## Scopes (`zalo.scope`)

Scopes such as `source.rust.meta.function` are split into atoms, interned in
a shared `ScopeRepository` and packed into a single integer, so equality,
ordering and prefix checks are cheap.

```python
from zalo.scope import parse_scopes

prefix = parse_scopes("source.rust")[0]
full = parse_scopes("source.rust.meta.function")[0]
assert prefix.is_prefix_of(full)
assert len(full) == 4
assert str(full) == "source.rust.meta.function"
assert prefix < full
```

`parse_scopes` splits its argument on whitespace and returns one `Scope` per
part. A scope keeps at most eight atoms; longer names are truncated. Empty
atoms (as in `a..b`) are kept. `global_repository()` returns the shared
repository and `replace_global_repository()` swaps it for another one.

## Themes (`zalo.raw_theme`, `zalo.theme`)

`RawTheme.load_from_file` reads a VSCode theme JSON file (or
`RawTheme.from_mapping` a parsed one). `colors` may use `foreground` or
`editor.foreground` (and likewise for the background); `tokenColors` scopes
may be a list or a comma-separated string. Malformed data raises
`ThemeFormatError`.

`load_theme` (or `compile_theme` / `CompiledTheme.from_raw_theme`) turns it
into a `CompiledTheme`: a default `Style`, the optional line-highlight and
line-number colours, and `CompiledThemeRule`s sorted from least to most
specific. A token rule without a scope sets the default colours.

```python
from zalo.theme import load_theme

theme = load_theme("vitesse-black.json")
print(theme.name, theme.theme_type, theme.default_style.foreground.as_hex())
```

`StyleModifier.apply_to` lays a rule's partial style over a base `Style`.

## Selectors (`zalo.selector`)

Theme selectors follow the VSCode rules, including the `>` child combinator:

```python
from zalo.scope import parse_scopes
from zalo.selector import parse_selector

selector = parse_selector("source.js meta.function > string")
stack = [parse_scopes(s)[0] for s in ("source.js", "meta.function", "string.quoted")]
assert selector.matches(stack)
```

`parse_selector` returns `None` for an empty selector or one ending in `>`.

## Colours and font styles (`zalo.color`, `zalo.font_style`)

```python
from zalo.color import Color, css_light_dark_color

red = Color.from_hex("#F00")
assert red.as_hex() == "#FF0000"
assert red.as_ansi_fg() == "38;2;255;0;0"
print(css_light_dark_color(red, Color.from_hex("white")))
```

`#RGB`, `#RGBA`, `#RRGGBB`, `#RRGGBBAA`, `white` and `black` are accepted;
anything else raises `InvalidHexColor`. `FontStyle` is a flag set built with
`FontStyle.from_theme_str("bold italic")`, with `ansi_escapes()` and
`css_attributes()`.

## CSS (`zalo.css`, `zalo.theme_registry`)

`generate_css(theme, prefix)` writes one CSS rule per theme rule, using the
atoms of the rule's target scope as classes:

```python
from zalo.css import scope_to_css_selector
from zalo.scope import parse_scopes

scope = parse_scopes("keyword.operator")[0]
assert scope_to_css_selector(scope, "g-", False) == ".g-keyword.g-operator"
assert scope_to_css_selector(scope, "g-", True) == "g-keyword g-operator"
```

Characters not allowed in class names are hex-escaped. By default a class is
the prefix followed by the atom; pass a `shortener`, a function of
`(identifier, prefix)`, to choose other class names.

`ThemeRegistry` holds compiled themes under their lower-cased names:

```python
from zalo.theme_registry import ThemeRegistry

registry = ThemeRegistry()
theme = registry.add_theme_from_path("vitesse-black.json")
stylesheet = registry.generate_css(theme.name, "g-")
all_sheets = registry.generate_all_css("g-")
```

Asking for an unknown theme raises `ThemeNotFound`. `get_all_themes()`
returns `SummarizedTheme`s sorted by name, numbered from 1.

## Options and anchors (`zalo.options`, `zalo.variant`, `zalo.anchors`)

`HighlightOptions` carries the lower-cased language and theme, the latter a
`Single` or a `Dual` light/dark pair from `zalo.variant`, with chainable
`merge_whitespace`, `merge_same_style_tokens` and `fallback_to_plain`.
`RenderOptions` carries line numbering and inclusive `(first, last)` ranges of
highlighted and hidden lines, checked with `is_highlighted` and `is_hidden`.
`normalize_string` turns CRLF and CR line endings into LF.

`anchor_active(is_first_line, anchor_position, current_pos)` says which of the
`\A` and `\G` regex anchors may match, and `AnchorActive.replace_anchors`
neutralises the others in a pattern.

## What this package does not do

It does not load grammars, tokenize source text or apply themes to tokens,
and it has no HTML or terminal renderer and no command-line program. The
options types are there for code that does those things.