# integrity_rules

Building blocks for a file integrity checker: path selection rules organised
in a tree, helpers for file types, permissions and URL-style strings, and the
small vocabulary used when writing reports.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Selecting files with rules

Rules are regular expressions matched from the start of an absolute path.
Each rule is selective, equal or negative (`RuleType.SELECTIVE`,
`RuleType.EQUAL`, `RuleType.NEGATIVE`); a negative rule overrides a positive
match. A rule may be limited to certain file types with a `Restriction`.

Every rule is filed under the tree node for the literal directory part in
front of its first regex construct, so `/etc/mtab` is filed under `/etc`.

```python
from integrity_rules.rx_rule import Restriction, RuleType
from integrity_rules.seltree import init_tree

tree = init_tree()
tree.add_rule("/etc", Restriction.NONE, RuleType.SELECTIVE, 1, "rules.conf", "/etc R")
tree.add_rule("/etc/mtab", Restriction.NONE, RuleType.NEGATIVE, 2, "rules.conf", "!/etc/mtab")

flags, rule = tree.check("/etc/passwd", Restriction.REG)  # flags == MatchFlag.SELECTIVE
flags, rule = tree.check("/etc/mtab", Restriction.REG)    # flags == MatchFlag.NEGATIVE
```

`SelTree.add_rule` returns the compiled `RxRule` and the path of the node it
was filed under; it raises `RuleError` for an invalid regex or a double slash
in the literal path part. `SelTree.check` returns a `(MatchFlag, rule)` pair:
`MatchFlag.SELECTIVE` or `MatchFlag.EQUAL` when the path is selected (the path
then gets a node of its own), `MatchFlag.NEGATIVE` when it is excluded, and
`MatchFlag.PARTIAL` when a rule only partly matched, meaning entries below a
directory may still be selected. `SelTree.get_node`,
`SelTree.get_or_create_node`, `SelTree.is_empty` and `SelTree.log_tree` give
access to the tree itself.

## Other modules

- `integrity_rules.tree`: `AATree`, a balanced ordered map (`insert`,
  `search`, `items`, `values`, iteration and `len`) used for the children of
  each rule-tree node.
- `integrity_rules.rx_rule`: file-type restrictions (`f`, `d`, `p`, `l`, `b`,
  `c`, `s`, ...) with `restriction_from_char`, `restriction_from_perm`,
  `file_type_char_from_perm`, `restriction_char` and `restriction_string`, and
  the names of rule types with `rule_type_long_string` and `rule_type_char`.
- `integrity_rules.url`: `UrlType`, `Url`, `get_url_type` and
  `get_url_type_string` for `file`, `stdout`, `syslog` and other targets.
- `integrity_rules.symboltable`: `Symbol` and `find_symbol` for named values.
- `integrity_rules.util`: `perm_to_char` (as in `ls -l`), percent encoding
  with `encode_string` / `decode_string`, `contains_unsafe`, `btoa`,
  `expand_tilde`, `strnstr`, `pipe_to_string` and `syslog_facility_lookup`.
- `integrity_rules.report_options`: `ReportLevel`, `ReportFormat`, `Action`,
  lookups by name (`get_report_level`, `get_report_format`) and back, and
  `get_summary_string` for the outline line of a report.
- `integrity_rules.report_values`: `get_file_type_string`, `byte_to_base16`
  and `get_time_string`, the text forms used in reports.

```python
from integrity_rules.util import perm_to_char
from integrity_rules.report_options import ReportLevel, get_report_level

perm_to_char(0o100644)                 # '-rw-r--r--'
get_report_level("changed_attributes") # ReportLevel.CHANGED_ATTRIBUTES
```

## What this package does not do

This is a library of building blocks, not a complete integrity checker. It
has no command-line program, does not read configuration files, does not scan
the filesystem or compute checksums, does not store or read a database of
file attributes, and does not write reports; it provides the rule matching
and the helpers such a program would use.