# auralib

Building blocks for desktop-style applications:

- **Keyrings** (`auralib.keyring`) – `Credential` records, `Store`, a
  password-protected SQLite file of credentials, `Keyring`, which opens a store
  by name, and `KeyringDialogController`, which validates credentials before
  storing them.
- **Password strength** – `get_password_strength` rates a password on the
  `PasswordStrength` scale (`BLANK` to `VERY_STRONG`).
- **Logging** (`auralib.logger`) – a `Logger` that prints to the terminal and,
  optionally, appends to a file, filtering by a minimum `LogLevel`.
- **Notifications** (`auralib.notifications`) – event data for in-app and
  desktop notifications (`NotificationSentEventArgs`,
  `ShellNotificationSentEventArgs`, `NotificationSeverity`) and a
  `NotifyIconMenu` model for tray-icon menus.
- **System** (`auralib.system`) – environment variable helpers,
  `exec_command`, and a `Process` that captures combined stdout/stderr and
  raises an `exited` event.
- **Network** (`auralib.network.webclient`) – a small `WebClient` to check that
  a site answers, fetch JSON text and download files with progress reporting.
- **Localization** (`auralib.localization.gettext`) – gettext helpers with
  context support (`pgettext`, `pngettext`).

## Installation

```
pip install auralib
```

To run the test suite:

```
pip install "auralib[test]"
pytest
```

## Examples

### Password strength

```python
from auralib.keyring.passwordstrength import get_password_strength

print(get_password_strength(""))          # PasswordStrength.BLANK
print(get_password_strength("abc1234"))   # PasswordStrength.WEAK
```

### Credential stores and keyrings

```python
from pathlib import Path
from auralib.keyring.credential import Credential
from auralib.keyring.store import Store

directory = Path("keyrings")
password = "password"
store = Store("demo", password, directory)
store.add_credential(Credential("Site", "https://example.com", "user@example.com", password))
print(store.get_credentials("Site"))
store.destroy()
print(Store.exists("demo", directory))    # False
```

Without a `directory`, stores are kept in a `Keyring` folder under the user
configuration directory. A store remembers a salted PBKDF2 hash of its password
and refuses to open (`ValueError`) with a different one; the credentials
themselves are stored unencrypted in the SQLite file.

`Keyring.access(name, password, directory)` opens or creates a keyring and
returns `None` if the password is empty or the store cannot be unlocked.
`KeyringDialogController` wraps a keyring for a settings dialog:
`is_enabled`, `is_valid`, `enable_keyring`, `disable_keyring` (which deletes
the keyring), `reset_keyring`, and `validate_credential`, which returns a
`CredentialCheckStatus` (`VALID`, or a combination of `EMPTY_NAME`,
`EMPTY_USERNAME_PASSWORD` and `INVALID_URI`).

### Logging

```python
from auralib.logger import Logger, LogLevel

with Logger("app.log", LogLevel.INFO) as logger:
    logger.log(LogLevel.DEBUG, "dropped")      # below the minimum
    logger.log(LogLevel.WARNING, "disk almost full")
```

Each entry looks like `[WARNING] file: <file>(<line>:<column>) `<function>`: <message>`.
`DEBUG` and `INFO` go to stdout, the rest to stderr.

### Running programs

```python
from auralib.system.environment import exec_command, get_variable
from auralib.system.process import Process

print(exec_command('echo "Hello World"'))   # "Hello World\n"
print(get_variable("PATH"))

process = Process("ls", ["-l"])
process.exited.subscribe(lambda e: print("exit code", e.exit_code))
process.start()
print(process.wait_for_exit())
print(process.output)
```

`Process` raises `FileNotFoundError` when the executable cannot be found.

### Menus for a tray icon

```python
from auralib.notifications.menu import NotifyIconMenu

menu = NotifyIconMenu()
menu.add_action("Open", lambda: print("open"))
menu.add_separator()
menu.add_action("Quit", lambda: print("quit"))
print(len(menu))   # 3
menu[0]()          # runs the "Open" action
menu.remove_separator(1)
```

### Downloading

```python
from auralib.network.webclient import WebClient

client = WebClient(timeout=10)
if client.get_website_exists("https://example.com"):
    client.download_file("https://example.com", "index.html", None, True)
```

Any answer from the server counts as success, whatever its status code. A
progress function is called as `(download_total, download_now, upload_total,
upload_now)`; returning a true value aborts the download.

### Localization

```python
from auralib.localization import gettext

gettext.init("myapp", "locale")
print(gettext.pgettext("menu", "File"))
print(gettext.pngettext("files", "{} file", "{} files", 3))
```

## What the package does not do

- It does not talk to the operating system's credential manager: an empty
  password never opens a keyring, and no password is generated or stored for
  you.
- It does not show notifications or tray icons; the notification classes and
  `NotifyIconMenu` are data models for a user interface to display.
- It has no network connectivity monitor, suspend inhibitor or taskbar
  integration, and no command-line program.