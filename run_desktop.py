#!/usr/bin/env python
"""Desktop app entrypoint for VanLedger."""

import flet as ft

from vanledger.desktop.app import main

if __name__ == "__main__":
    ft.app(target=main)
