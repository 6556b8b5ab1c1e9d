"""Shell hook scripts, escaping, environment export and opening a new shell process."""