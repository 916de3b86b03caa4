# unionlayer

`unionlayer` presents two directories as one merged view:

* a **lower** directory, the base layer, which is never modified, and
* an **upper** directory, which receives every change.

An entry in the upper layer takes precedence over an entry with the same name
in the lower layer. When a file that exists only in the lower layer is opened
for writing, it is first copied into the upper layer (copy-on-write), with the
same permission bits.

When a file or directory that exists in the lower layer is removed, an empty
*whiteout* marker named `.wh.<name>` is created beside where it would sit in
the upper layer. The marker hides the lower entry from listings and lookups.

## Installation

```
pip install unionlayer
```

The package has no runtime dependencies. It relies on POSIX calls such as
`os.pread` and `os.pwrite`.

## Usage

Paths given to the filesystem are absolute paths within the merged view, for
example `/notes.txt` or `/docs/readme.txt`. Both layer directories are turned
into real paths when `UnionFS` is created.

```python
import os
from unionlayer.operations import UnionFS

fs = UnionFS("/srv/base", "/srv/changes")

print(fs.readdir("/"))          # ['.', '..', upper entries..., remaining lower entries...]
info = fs.getattr("/notes.txt") # os.lstat() of the visible copy

fh = fs.open("/notes.txt", os.O_RDWR)   # copies the file up first if it is only in the base
fs.write(fh, b"hello", 0)               # returns the number of bytes written
print(fs.read(fh, 5, 0))                # b'hello'
fs.release(fh)

fh = fs.create("/new.txt", 0o644, os.O_WRONLY)  # lifts any whiteout on /new.txt
fs.release(fh)

fs.mkdir("/drafts", 0o755)
fs.rmdir("/drafts")
fs.unlink("/notes.txt")   # removes the upper copy; whites out the base copy
```

What each operation does:

* `getattr(path)` – `os.stat_result` of the visible file, without following
  symlinks.
* `readdir(path)` – `"."` and `".."`, then the upper entries (whiteout markers
  left out), then the lower entries that are neither present in the upper
  layer nor whited out.
* `open(path, flags)` – returns an OS file descriptor. For write access, a file
  present only in the lower layer is copied up, creating its parent
  directories in the upper layer as needed.
* `read(fh, size, offset)` / `write(fh, data, offset)` – positional read and
  write on a descriptor.
* `create(path, mode, flags)` – removes a whiteout for `path` if there is one
  and opens the file in the upper layer with `O_CREAT` added.
* `mkdir(path, mode)` – creates the directory in the upper layer.
* `unlink(path)` – deletes the upper copy if there is one, and writes a
  whiteout if the lower layer has the file.
* `rmdir(path)` – removes the upper directory if there is one; if it is not
  empty, everything below it in the upper layer is removed first. A whiteout
  is written if the lower layer has the directory.
* `release(fh)` – closes a descriptor, ignoring errors.

Failures are raised as `OSError` subclasses carrying the matching `errno`,
for example `FileNotFoundError` for a path that is missing from both layers
or hidden by a whiteout.

### Path resolution

`unionlayer.paths.Layers` provides the lookups on their own:

```python
from unionlayer.paths import Layers

layers = Layers("/srv/base", "/srv/changes")
layers.upper("/a/b.txt")      # '/srv/changes/a/b.txt'
layers.lower("/a/b.txt")      # '/srv/base/a/b.txt'
layers.whiteout("/a/b.txt")   # '/srv/changes/a/.wh.b.txt'
layers.resolve("/a/b.txt")    # the visible physical path, or FileNotFoundError
```

`whiteout` raises `ValueError` for a path without a `/`. The marker prefix is
available as `unionlayer.paths.WHITEOUT_PREFIX`.

### Copy-on-write helpers

`unionlayer.cow` holds the two helpers used for copying up:

* `ensure_dir_path(upper_dir, path)` creates every parent directory of `path`
  inside `upper_dir`, ignoring directories that cannot be created;
* `copy_file(src, dst)` copies a file to a new destination with the source's
  permission bits, raising `FileExistsError` if `dst` already exists.

## What it does not do

`unionlayer` is a library of operations on directories. It does not mount
anything, provides no command-line program, and has no kernel or FUSE
binding; a caller invokes the `UnionFS` methods directly. Only the operations
listed above exist: there is no rename, truncate, chmod, symlink or
extended-attribute support.

## Running the tests

```
pip install -e ".[test]"
pytest
```