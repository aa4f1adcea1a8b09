#!/usr/bin/env python3
"""vcf-exporter: run without installing with  python3 start.py export contacts.json"""
import os
import sys

script_dir = os.path.dirname(os.path.abspath(__file__))
src_dir    = os.path.join(script_dir, "src")

sys.path.insert(0, src_dir)
os.environ["PYTHONPATH"] = src_dir + os.pathsep + os.environ.get("PYTHONPATH", "")

from vcf_exporter.cli import app
app()
