"""A small web client for existence checks, JSON fetches and downloads."""