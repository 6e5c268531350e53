# envsetup

`envsetup` creates or updates a project's `.env` file from its
`.env.example` template by asking for each value at the terminal.

## Usage

Run it from the directory that holds `.env.example`:

```
envsetup
```

Or point it at another directory:

```
envsetup -C path/to/project
```

For each variable in `.env.example` you get one prompt. It looks like this:

```
KEY (description) [current value]: 
```

The value in square brackets is pre-filled:

- it is the current value from `.env` when `.env` has that variable with a
  non-empty value;
- otherwise it is the example value from the template.

At each prompt:

- press Enter with no input to keep the pre-filled value;
- enter a lone `-` to clear the value;
- enter anything else to use it as the new value.

When every prompt is answered, `envsetup` shows the proposed changes:

```
Proposed changes:
~ Changed: KEY1: "old" -> "new"
~ Cleared: KEY2 (was "old")
+ Added: KEY3="value"
```

It then asks `Save these changes? [Y/n]`. An empty answer, `y` or `yes`
saves; `n` or `no` discards the changes. Any other answer asks again.
When you save, an existing `.env` is first copied to `.env.old`, and then
`.env` is rewritten. If nothing changed, the program prints
`No changes to apply to .env file.` and leaves `.env` alone.

Pressing Ctrl+C or sending end-of-input at any prompt cancels the run
without writing anything.

The exit status is 1 in three cases: `.env.example` is missing or
unreadable, it declares no variables, or `.env` could not be written.
In every other case it is 0.

## Template format

```
# Lines starting with # are ignored
DATABASE_URL=postgres://localhost/app # Connection string
API_TOKEN= # Leave empty to fill in later
GREETING="hello world"
FEATURE_FLAG
```

Everything after the first `#` on a line becomes that variable's
description. A value in double quotes is unquoted, with `\\` and `\"`
unescaped. A line with a key and no `=` declares the variable with an
empty example value.

## Written values

`.env` is written one `KEY=value` line per variable, in template order.
A value is put in double quotes when it is empty or contains any of these:

- a space, `#`, `=`, `"`, `$`, a backslash or a backtick;
- a line break.

Inside the quotes, backslashes, quotes, `\n` and `\r` are escaped.

## Library use

```python
from envsetup.model import EnvSetup, SetupError

setup = EnvSetup(".")
setup.load()                      # raises SetupError if the template is missing or empty
values = setup.initial_values()   # pre-filled values, keyed by variable name
values["GREETING"] = "hi"
if setup.prepare(values):         # True when something differs from .env
    print(setup.diff_summary)
    setup.save()                  # backs up .env to .env.old, then writes it
```

The module `envsetup.model` also has `build_diff(env_vars, existing, collected)`.
It returns the change lines shown above. The module `envsetup.env_utils` holds
the file helpers:

- `read_env_vars_from_file`
- `read_existing_env_file`
- `write_env_file`
- `backup_env_file`
- the `EnvVar` dataclass

`envsetup.cli.prompt_values(setup, input_func)` runs the prompts with any
input function, which is useful for scripting.

## Limitations

The prompts are plain line-by-line questions. There is no full-screen form.
Only variables declared in `.env.example` are written. Any other entries
in an existing `.env` are dropped when it is rewritten; the previous
contents are kept in `.env.old`.

## Running the tests

```
pip install -e ".[test]"
pytest
```