"""
Point Ops — поворот и масштабирование точки относительно центра

Замкнутые формулы, без линейной алгебры.
"""

import math

from src.core.domain import Point


def rotate_point(point: Point, center: Point, angle: float) -> Point:
    """
    Поворот точки вокруг центра.

    Формула:
        x' = cos·(x - cx) - sin·(y - cy) + cx
        y' = sin·(x - cx) + cos·(y - cy) + cy

    Args:
        point: Точка для поворота
        center: Центр поворота
        angle: Угол в радианах (против часовой стрелки при оси Y вверх)

    Returns:
        Повёрнутая точка
    """
    cos_theta = math.cos(angle)
    sin_theta = math.sin(angle)
    dx = point.x - center.x
    dy = point.y - center.y
    return Point(
        x=cos_theta * dx - sin_theta * dy + center.x,
        y=sin_theta * dx + cos_theta * dy + center.y,
    )


def scale_point(point: Point, center: Point, scale_factor: float) -> Point:
    """
    Масштабирование точки относительно центра.

    Args:
        point: Точка для масштабирования
        center: Центр масштабирования
        scale_factor: Коэффициент масштаба

    Returns:
        Масштабированная точка
    """
    return Point(
        x=center.x + (point.x - center.x) * scale_factor,
        y=center.y + (point.y - center.y) * scale_factor,
    )
