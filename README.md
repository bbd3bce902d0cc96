# photoalbum

A small photo album project manager. An album project is a name plus the
directory that holds it. The package checks those settings, creates the
project directory on disk when it does not exist yet, and keeps the projects
as nodes of a project tree.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## The `photoalbum` command

    photoalbum [--path DIR] [NAME ...]

For each `NAME`, the command fills in a project settings form with that name
and `DIR` (the current directory when `--path` is not given) and runs it
through the creation wizard:

- if the settings are valid, the wizard is accepted and the project directory
  `DIR/NAME` is created and added to the tree;
- otherwise the wizard is rejected and `NAME: <hint>` is written to standard
  error, where the hint is one of the messages of `InputStatus` (empty name
  or path, parent path missing, project directory already exists).

A name given twice is added only once. At the end the command prints every
project in the tree as `name<TAB>full path`. The exit status is 1 if any
project was rejected, 0 otherwise.

## Using it as a library

### Checking settings

```python
from photoalbum.projectsettings import validate_input
from photoalbum.consts import InputStatus

status = validate_input("holiday", "/home/me/albums")
if status is not InputStatus.VALID:
    print(status.message())
```

`validate_input(name, path)` strips both values and returns
`InputStatus.EMPTY_FIELD`, `PATH_NOT_EXIST`, `PROJECT_EXISTS` or `VALID`.
`InputStatus.message()` gives the hint text for a status (empty for `VALID`).

`ProjectSettingsForm(name, path, on_complete_changed)` holds the name and path
being edited (the path defaults to the current directory):

- `validate()` returns the status without changing anything;
- `check_input()` validates, stores the hint in `tips`, calls
  `on_complete_changed` if one was given, and returns the status;
- `is_complete()` is true when the settings are valid;
- `settings()` returns the stripped `(name, path)`;
- `browse(chooser)` calls `chooser` with a starting directory (the current
  path, or the working directory if that is empty or missing); a non-empty
  result becomes the new path and is checked at once.

### The wizard

`Wizard(form)` wraps a `ProjectSettingsForm`. Callbacks registered with
`connect(callback)` receive `(name, path)` when `done(result)` is called with
anything other than `DialogResult.REJECTED`; `disconnect(callback)` removes
one and tells whether it was registered. The last result is kept in
`Wizard.result`.

### The project tree

`ProjectTree.add_project(name, path)` adds a `ProTreeItem` for the absolute
`path/name`, creating the directory when needed. It returns `None` when that
project is already in the tree or the directory cannot be created. `items`
lists the project nodes and `paths` their full paths.

`on_item_pressed(item, right_button)` returns the list of `ContextAction`
entries (import, set active project, close project, slide show) for a
right-button press on a project node, and remembers that node; otherwise it
returns `None`. `import_directory(chooser)` calls `chooser` with the
remembered project's path and returns the first directory it chose.

`ProTreeItem` nodes carry a `name`, `path`, `item_type` (`TreeItemType.PRO`,
`DIR` or `PIC`), their `root`, optional sibling links `prev_item` and
`next_item`, and `children`; `add_child()`, `first_child()` and
`last_child()` work on the children.

`ProjectTreeDialog(tree)` hosts a tree; `recv_pro_setting(name, path)` adds a
project to it.

### The main window

`MainWindow(tree_dialog)` ties these together. `menus()` returns the menu
entries (`MenuAction` with label, icon and shortcut) in menu-bar order, and
`create_project(run_wizard)` builds a wizard, connects it to the tree dialog,
calls `run_wizard(wizard)` and returns the wizard's result.

## What it does not do

There is no graphical interface: menus, context actions and icons are plain
data, and directory choosers are callables you supply. Choosing a directory
to import only returns its path; no pictures are copied or read. Opening a
project only writes a debug log line, and the set-active, close-project and
slide-show actions and the background-music menu entry have no behaviour
behind them. The project tree is kept in memory only and is not saved.