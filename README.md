# boilgen

The building blocks of a database-first model generator. It describes a
database schema (tables, columns, primary and foreign keys), works out Go-style
names for every table, column and relationship, applies user type
replacements, validates configuration, and plans which files and folders
templates are written into. It has no dependencies beyond the standard library.

## Modules

| Module | Purpose |
| --- | --- |
| `boilgen.columns` | Column lists (`infer`, `whitelist`, `blacklist`, `greylist`, `no_columns`) that decide which columns go into an insert or an update, plus the list helpers `set_complement`, `set_merge` and `sort_by_keys` |
| `boilgen.context` | An immutable `Context` carrying debug, hook-skipping and timestamp-skipping flags; `HookPoint` enumerates model hooks; `set_debug_mode` and `set_debug_writer` set the global defaults |
| `boilgen.errors` | `BoilError`, `wrap_err` and `is_boil_err` |
| `boilgen.db` | The global database handle (`set_db`, `get_db`, `begin`) and the timestamp time zone (`set_location`, `get_location`, UTC by default) |
| `boilgen.text_helpers` | Casing and inflection (`title_case`, `camel_case`, `plural`, `singular`), relationship naming (`txt_name_to_one`, `txt_name_to_many`) and primitive-type checks |
| `boilgen.dbcolumn` | `Column`, `PrimaryKey`, `ForeignKey`, `SQLColumnDef`, `SQLColumnDefs` and column filters |
| `boilgen.driverconfig` | `DriverConfig`, a dictionary with typed lookups, plus `tables_from_list`, `columns_from_list`, `default_env` and `combine_config_and_db_foreign_keys` |
| `boilgen.schema` | `Table`, `Dialect`, `DBInfo` (with `from_dict` / `to_dict`), and `known_column`, `filter_primary_key`, `filter_foreign_keys`, `set_is_join_table` |
| `boilgen.binary_driver` | `BinaryDriver`, which runs an external driver program and exchanges JSON with it; `execute`; `driver_main` for the other end of that contract; `DriverError` |
| `boilgen.aliases` | `Aliases`, `TableAlias`, `RelationshipAlias` and `fill_aliases` |
| `boilgen.config` | The generation `Config` and its parts, and `convert_aliases`, `convert_type_replace`, `convert_foreign_keys` for loosely typed configuration data |
| `boilgen.output` | Output file naming (`get_output_filename`, `output_filename_parts`), the file header (`disclaimer`, `package_header`) and `write_file` |
| `boilgen.templates` | Template loaders (`FileLoader`, `Base64Loader`, `AssetLoader`), `Once`, template ordering and `generate_tag_with_case` |
| `boilgen.generator` | Type replacements, primary key / tag validation, template discovery and grouping, and output folder creation |

## Examples

Choosing the columns for an insert:

```python
from boilgen.columns import infer, whitelist

cols = ["a", "b", "c"]
defaults = ["a", "c"]
no_defaults = ["b"]

insert, returning = infer().insert_column_set(cols, defaults, no_defaults, [])
# insert == ["b"], returning == ["a", "c"]

insert, returning = whitelist("a").insert_column_set(cols, defaults, no_defaults, [])
# insert == ["a"], returning == ["c"]
```

Filling in names for a table:

```python
from boilgen.aliases import Aliases, fill_aliases
from boilgen.dbcolumn import Column
from boilgen.schema import Table

aliases = Aliases()
fill_aliases(aliases, [Table(name="videos", columns=[Column(name="id"), Column(name="name")])])
video = aliases.table("videos")
# video.up_plural == "Videos", video.down_singular == "video"
# video.column("id") == "ID"
```

Skipping hooks for one call chain:

```python
from boilgen.context import Context, skip_hooks, hooks_are_skipped

ctx = skip_hooks(Context())
assert hooks_are_skipped(ctx)
assert not hooks_are_skipped(Context())
```

Naming files so the Go toolchain does not treat them as build-constrained:

```python
from boilgen.output import get_output_filename

get_output_filename("hello_test", False, True)   # "hello_test_model"
get_output_filename("_hello", True, True)        # "und_hello_test"
```

Wrapping errors raised by the library:

```python
from boilgen.errors import wrap_err, is_boil_err

err = wrap_err(ValueError("test error"))
assert str(err) == "test error"
assert is_boil_err(err)
```

## External drivers

A driver is any program that takes one of the methods `assemble`, `templates`
or `imports` as its single argument. For `assemble` it reads the driver
configuration as JSON on standard input; in every case it writes its answer as
JSON on standard output, and when it fails it exits non-zero with a plain text
message on standard error.

`BinaryDriver(executable)` calls such a program: `assemble(config)` returns a
`DBInfo`, `templates()` a mapping of template names to base64 contents, and
`imports()` the driver's import collection as a dictionary. Anything the
driver writes to standard error is passed on; a non-zero exit raises
`DriverError`. `driver_main(driver, argv)` serves one such request for a
Python object with `assemble`, `templates` and `imports` methods and returns
the exit status.

## What it does not do

- It does not render templates. Loaders return template bytes, and
  `group_templates` / `output_filename_parts` work out where output goes, but
  no template engine is included and there is no single call that runs a whole
  generation.
- It ships no database drivers; schema information comes from an external
  driver program or from `Table` / `DBInfo` objects you build.
- It has no command-line program.
- It does not format generated Go code; `write_file` writes the content as
  given.