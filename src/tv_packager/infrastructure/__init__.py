"""Filesystem, template, state-file and toolchain stages."""
