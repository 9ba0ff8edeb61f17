"""Environment variables, shell commands and managed processes."""