"""Utility helpers for selrange"""
