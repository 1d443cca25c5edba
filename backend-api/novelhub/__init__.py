"""
NovelHub - 웹소설 연재/열람 플랫폼 백엔드
"""

__version__ = "1.0.0"
