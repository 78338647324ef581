"""콘솔 클라이언트 패키지.

Interactive console client for the Shifts Logger API.

Talks to a running API server over HTTP; run with
``python -m shifts_logger.console``.
"""
