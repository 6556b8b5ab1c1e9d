# vfox

Reusable pieces of an SDK version manager, in pure Python.

## What is inside

- `vfox.versions`: `compare_version(v1, v2)` compares dotted version strings
  part by part as integers and returns `1`, `0` or `-1`. Missing parts count as
  zero, and so do parts that are not integers. `RUNTIME_VERSION` holds the
  runtime version string.
- `vfox.sets`: `MapSet` and `SortedSet`. Both have `add` (it returns `True` if
  the value was new), `remove`, `in`, `len`, iteration and `to_list`.
  `SortedSet` keeps values in the order they were first added.
- `vfox.timeutil`: `get_timestamp()`, `get_begin_of_today()` (local midnight as
  a Unix time) and `is_before_today(timestamp)`.
- `vfox.platform_info`: `get_os_type()` and `get_arch_type()` return `OSType`
  or `ArchType` members for known systems. Any other system or architecture
  comes back as a plain string.
- `vfox.fileutil`: `file_exists`, `copy_file`, and `move_files`. `move_files`
  moves a file, or every entry of a directory, into a target directory.
- `vfox.models`: `Info` (with `label()` and `storage_path(parent_dir)`),
  `Package`, `UseScope`, `RecordSource`, and the plugin repository records
  `RemotePluginInfo` and `Category`. The repository records build from JSON
  objects with `from_dict`.
- `vfox.decompressor`: `new_decompressor(src)` picks a decompressor from the
  file name, or returns `None` for anything else:
  - `GzipTarDecompressor` for `.tar.gz` and `.tgz`
  - `XZTarDecompressor` for `.tar.xz`
  - `ZipDecompressor` for `.zip`

  Tar archives always lose the first path component of each entry. Zip
  archives lose it only when all entries share one top-level folder; see
  `find_root_folder_in_zip`.
- `vfox.downloader`: `Downloader(local_path).download(url)` saves a URL into
  `local_path` with a progress bar and returns the file path. It raises
  `FileNotFoundError` on a 404 answer.
- `vfox.jsoncodec`: `encode` and `decode` with strict rules for tables:
  - A dict with keys `1..n` encodes as an array.
  - A dict with only string keys encodes as an object, with its keys sorted.
  - An empty table encodes as `[]`.
  - Sparse arrays, mixed keys, tables met twice and unsupported types raise
    `JSONEncodeError`.
  - `decode` returns every number as a float.
- `vfox.shells`: hook scripts and environment export for bash, zsh, fish and
  PowerShell.
  - `Bash`, `Zsh`, `Fish` and `PowerShell` each have `activate()` and
    `export(envs)`.
  - `bash_escape`, `fish_escape` and `powershell_escape` quote text for each
    shell.
  - `vfox.shells.registry.new_shell(name)` looks a shell up by name, ignoring
    case: `bash`, `zsh`, `fish` or `pwsh`. It returns `None` for any other
    name.
  - `vfox.shells.process.get_process()` returns a `Process` for the host
    system. Its `open(pid)` starts a new copy of the shell that process `pid`
    is running.
- `vfox.html_query`: `parse(text)` gives a `Document`. Its `find` returns a
  `Selection` with `text`, `html`, `find`, `first`, `last`, `each` (the index
  starts at 1), `attr` and `eq`.
- `vfox.http_client`: `HttpModule(proxy_url=None)` has `get` and `head`, which
  return an `HttpResponse`. A failed request raises `HttpError`.
- `vfox.fileops`: `FileOperation(root_path).symlink(src, dest)` creates a
  symbolic link with both paths taken under the root.
- `vfox.select`: `PageKVSelect`, a paged, fuzzy-searchable terminal picker of
  `KV` entries.
  - `show()` runs it in the terminal and returns the chosen entry.
  - Ctrl-C exits with status 0.
  - `rank_find_fold` does the case-insensitive fuzzy matching.

## Examples

```python
from vfox.versions import compare_version
from vfox.shells.bash import bash_escape
from vfox.shells.registry import new_shell
from vfox.html_query import parse

compare_version("0.2.3", "0.2.1")      # 1
bash_escape("hello world")             # "$'hello world'"

shell = new_shell("zsh")
script = shell.export({"JAVA_HOME": "/opt/java", "OLD_VAR": None})
# sets JAVA_HOME and unsets OLD_VAR

doc = parse("<div id='t2' name='123'>456</div><div>222</div>")
doc.find("#t2").attr("name")           # "123"
doc.find("div").eq(1).text()           # "222"
```

Unpacking a downloaded archive:

```python
from vfox.decompressor import new_decompressor

decompressor = new_decompressor("/tmp/jdk-21.tar.gz")
if decompressor is not None:
    decompressor.decompress("/tmp/jdk-21")
```

## What this package does not do

This is a library of parts, not a finished version manager. It has:

- no command-line program;
- no plugin loader or script runtime;
- no install, uninstall or `use` workflow;
- no record of chosen versions;
- no configuration files.

The hook scripts from `activate()` are templates. They hold the placeholders
`{{.EnvContent}}` and `{{.SelfPath}}`, which the caller must fill in.

## Tests

The test suite uses pytest and responses. Both come with the `test` extra.