# simplejrpc

Building blocks for small service applications:

- `simplejrpc.config` – JSON configuration files found by a fixed search
  order, read through dot-separated paths (`"logger.level"`), with optional
  environment prefixes (`test`, `dev`, `prod`).
- `simplejrpc.glog` – a standard-library logger set up from a configuration
  mapping, writing to a size-rotated log file, and a wrapper that attaches
  stack traces to error messages.
- `simplejrpc.gi18n` – translations loaded from INI files per language
  (`en`, `zh`, `zh-CN`, `zh-TW`), with plain and printf-style lookup.
- `simplejrpc.gvalid` – rule-based validation of dataclass fields
  (`required`, `min_length`, `range`, plus your own validators).
- `simplejrpc.container` – a thread-safe list (`AnyArray`) and string-keyed
  map (`StrAnyMap`).
- `simplejrpc.core` – one `Container` holding the configuration, logger and
  validator.
- `simplejrpc.gerror` – `LocalCode` error-code values and `HttpError`.
- `simplejrpc.boxs` – small helpers: `choose`, `struct_to_map`,
  `map_to_struct`, `join_int_slice`.

## Installing

```
pip install .
```

The package has no runtime dependencies. For the test suite:

```
pip install ".[test]"
pytest
```

## Configuration

A configuration document is read through a formatter. Paths use dots to
step into nested objects. `get_value` returns a new formatter for the path
and leaves the original unchanged.

```python
from simplejrpc.config.formatter import ConfigFormatter

content = {
    "logger": {"level": "info", "stdout": True, "nested": {"key": "value"}},
    "name": "service",
    "port": 8080,
}
fmt = ConfigFormatter(content)

fmt.get_value("logger.level").string()        # "info"
fmt.get_value("logger.nested.key").string()   # "value"
fmt.get_value("logger.stdout").bool()         # True
fmt.get_value("port").int()                   # 8080
fmt.get_value("missing").string_with_default("fallback")  # "fallback"
```

The typed readers are `string`, `int`, `float64`, `bool`, `map` and `list`.
A missing path or a value of the wrong type raises `ConfigError`
(from `simplejrpc.config.base`); `string_without_err`, `int_without_err`,
`bool_without_err`, `map_without_err` and `list_without_err` return an empty
value instead, and `string_with_default` / `int_with_default` return the
given default.

### Configuration files

`load_config(root_path=None)` in `simplejrpc.config.file_adapter` finds a
JSON file, parses it and returns a `Config`. When the `CONFIG_PATH`
environment variable names an existing file, that file is used. Otherwise,
with `root_path` defaulting to the working directory, these are tried in
order:

1. `<root>/manifest/config.json`
2. `<root>.json`
3. `<root>/config.json`
4. `<root>/config/config.json`

`ConfigError` is raised when no file is found or it cannot be parsed.
`Config.cfg()` returns the formatter and `Config.must_data()` the raw dict.
`FileAdapter` does the searching on its own if you need it: `available()`,
`data()` and the `path` that was found.

### Environments

`with_env_formatter(env)` from `simplejrpc.config.env` returns an option
that wraps a config's formatter in an `EnvFormatter`: with the environment
`test`, a lookup of `"logger"` reads `"test.logger"`. Environment names are
matched case-insensitively; unknown names fall back to `prod`.

```python
from simplejrpc.config.env import with_env_formatter
from simplejrpc.config.file_adapter import load_config

config = load_config("/srv/app")
with_env_formatter("test")(config)
config.cfg().get_value("logger.level").string()   # reads "test.logger.level"
```

## Logging

```python
from simplejrpc.glog.log_config import load_log_config
from simplejrpc.glog.logger import GLogger, new_logger

settings = load_log_config({
    "path": "logs/",
    "file": "{Y-m-d}.log",
    "level": "info",
    "stdout": False,
    "rotateBackupLimit": 7,
    "RotateBackupCompress": 9,
    "rotateExpire": "7d",
    "writerColorEnable": False,
})
logger = new_logger(settings)        # a logging.Logger named "simplejrpc"
log = GLogger(logger)
log.info("started", port=8080)       # keyword arguments are appended as JSON
log.error("something failed")        # message followed by the current stack
```

Keys are matched case-insensitively; unknown keys are ignored and a value
of the wrong type raises `ValueError`. `{Y-m-d}` in the file name becomes
today's date. The log file rotates at 10 MB; `rotateBackupLimit` caps the
number of backups, `rotateExpire` (`"Nd"` or `"Nh"`) sets their maximum age
in whole days, and a positive `RotateBackupCompress` gzips them. Levels are
`debug`, `info`, `warn`, `error`, `dpanic`, `panic` and `fatal`; anything
else means `info`.

`GLogger` also has `warn`, `debug`, `error_with_stack` (stacks of all
threads), `fatal` (logs, then raises `SystemExit(1)`) and `panic` (logs,
then raises `RuntimeError`).

## Translations

Translation files are INI files named by language, e.g. `en.ini` and
`zh-CN.ini`. Keys at the top of the file (before any section header) or
under `[DEFAULT]` are read; surrounding quotes are removed from values.

```python
from simplejrpc.gi18n import manager

manager.set_path("/path/to/i18n")     # searches the folder, loads en.ini
manager.set_language("zh-CN")         # loads zh-CN.ini and makes it active
manager.t("Welcome")                  # translated text, or the key itself
manager.tf("Greeting", "World")       # printf-style: "Hello %s" -> "Hello World"
```

`set_path` raises `FileNotFoundError` when the folder has no English file,
and `set_language` when there is no file for the language. The folder is
searched recursively. Without `set_path`, the folder named by the
`I18N_PATH` environment variable, or else `i18n/` under the working
directory, is searched. `manager.instance()` returns the shared
`I18nManager`; `I18nMessage` (in `simplejrpc.gi18n.message`) holds the
loaded translations and can be used directly.

Only `.ini` files are picked up by the folder search. `JsonParser` and
`TomlParser` in `simplejrpc.gi18n.parser` read JSON and TOML files when
given a path directly, via `create_parser(FileType.JSON, path)` and the like.

## Validation

Rules are given in dataclass field metadata under a tag name, joined with
`|`. A rule may take options after `:` and a custom message after `#`.

```python
from dataclasses import dataclass, field

from simplejrpc.gvalid.errors import RuleViolation
from simplejrpc.gvalid.rules import MinLengthValidator, RangeValidator, RequiredValidator
from simplejrpc.gvalid.visitor import ValidatorVisitor
from simplejrpc.gvalid.walker import StructWalker


@dataclass
class User:
    name: str = field(metadata={"validate": "required#name is missing|min_length:3"})
    score: float = field(default=50.0, metadata={"validate": "range:0,100"})


visitor = ValidatorVisitor()
visitor.register_validator("required", RequiredValidator())
visitor.register_validator("min_length", MinLengthValidator())
visitor.register_validator("range", RangeValidator())
walker = StructWalker(visitor, "validate")

walker.walk(User(name="alice"))        # passes
try:
    walker.walk(User(name=""))
except RuleViolation as exc:
    print(exc)                         # "name is missing"
```

- `required` fails on `None`, zero, `False`, and empty strings, collections
  or dataclasses.
- `min_length:N` fails on non-empty strings shorter than `N` UTF-8 bytes.
- `range:MIN,MAX` fails on floats outside the inclusive range; other
  values pass.

Rules run in order and the first failure is raised; rules with no
registered validator are skipped. A custom message set with `#` stays with
that validator instance for later errors. Objects that are not dataclass
instances are not validated.

A custom rule subclasses `Validator` from `simplejrpc.gvalid.field`:

```python
from simplejrpc.gvalid.field import Validator


class IntValidator(Validator):
    def validate(self, field, value):
        if not isinstance(value, int):
            raise self.new_validation_error(field.name, "must be an integer").with_message()


walker.register_validator("int", IntValidator())
```

`simplejrpc.gvalid.errors` holds `ValidationError` (field and message,
shown as `"field: message"`), `RuleViolation` (message only) and
`ValidationErrors` (several errors joined with `"; "`).

## Application container

```python
from simplejrpc.config.env import with_env_formatter
from simplejrpc.core import get_config_string, get_container, init_container

container = init_container(with_env_formatter("test"), root_path="/srv/app")
container.glog().info("ready")
get_config_string("name")            # string value, or "" when missing
```

`init_container(*options, root_path=None)` loads the configuration, applies
each option to it, sets up the logger from its `logger` section and
registers `required`, `min_length` and `range` on a walker for the
`validate` tag. The `Container` has `logger`, `config` and `valid`
attributes, plus `glog()`, `cfg_fmt()` and `clone(**replacements)`.
`get_container()` returns the installed container (or raises
`RuntimeError`), and `require_config_string(section)` raises `ConfigError`
when the value is missing.

## What this package does not do

There is no RPC server, network transport or command-line command here:
the package supplies configuration, logging, translation, validation and
container pieces for an application to build on.