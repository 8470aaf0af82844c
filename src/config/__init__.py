"""Bundled YAML configuration (config.yaml, included files, factory defaults)"""
