import pytest

from chromatools.integral_image import RollingIntegralImage


def test_all():
    image = RollingIntegralImage(4)

    image.add_row([1, 2, 3])
    assert image.num_columns == 3
    assert image.num_rows == 1
    assert image.area(0, 0, 1, 1) == 1
    assert image.area(0, 1, 1, 2) == 2
    assert image.area(0, 2, 1, 3) == 3
    assert image.area(0, 0, 1, 3) == 1 + 2 + 3

    image.add_row([4, 5, 6])
    assert image.num_columns == 3
    assert image.num_rows == 2
    assert image.area(1, 0, 2, 1) == 4
    assert image.area(1, 1, 2, 2) == 5
    assert image.area(1, 2, 2, 3) == 6
    assert image.area(0, 0, 2, 3) == 1 + 2 + 3 + 4 + 5 + 6

    image.add_row([7, 8, 9])
    assert image.num_columns == 3
    assert image.num_rows == 3

    image.add_row([10, 11, 12])
    assert image.num_columns == 3
    assert image.num_rows == 4
    assert image.area(0, 0, 4, 3) == (1 + 2 + 3) + (4 + 5 + 6) + (7 + 8 + 9) + (10 + 11 + 12)

    image.add_row([13, 14, 15])
    assert image.num_columns == 3
    assert image.num_rows == 5
    assert image.area(1, 0, 2, 1) == 4
    assert image.area(1, 1, 2, 2) == 5
    assert image.area(1, 2, 2, 3) == 6
    assert image.area(4, 0, 5, 1) == 13
    assert image.area(4, 1, 5, 2) == 14
    assert image.area(4, 2, 5, 3) == 15
    assert image.area(1, 0, 5, 3) == (4 + 5 + 6) + (7 + 8 + 9) + (10 + 11 + 12) + (13 + 14 + 15)

    image.add_row([16, 17, 18])
    assert image.num_columns == 3
    assert image.num_rows == 6
    assert image.area(2, 0, 3, 1) == 7
    assert image.area(2, 1, 3, 2) == 8
    assert image.area(2, 2, 3, 3) == 9
    assert image.area(5, 0, 6, 1) == 16
    assert image.area(5, 1, 6, 2) == 17
    assert image.area(5, 2, 6, 3) == 18
    assert image.area(2, 0, 6, 3) == (7 + 8 + 9) + (10 + 11 + 12) + (13 + 14 + 15) + (16 + 17 + 18)


def test_from_data():
    image = RollingIntegralImage.from_data(2, [0.0, 1.0, 2.0, 3.0])
    assert image.num_rows == 2
    assert image.num_columns == 2
    assert image.area(0, 0, 2, 2) == 0.0 + 1.0 + 2.0 + 3.0
    assert image.area(1, 1, 2, 2) == 3.0
    assert image.area(0, 1, 2, 2) == 1.0 + 3.0


def test_from_data_rejects_partial_row():
    with pytest.raises(ValueError):
        RollingIntegralImage.from_data(2, [1.0, 2.0, 3.0])


def test_empty_rectangle_is_zero():
    image = RollingIntegralImage(2)
    image.add_row([1, 2])
    assert image.area(0, 1, 1, 1) == 0.0
    assert image.area(1, 0, 1, 2) == 0.0


def test_reset():
    image = RollingIntegralImage(2)
    image.add_row([1, 2, 3])
    image.reset()
    assert image.num_rows == 0
    assert image.num_columns == 0
    image.add_row([5, 6])
    assert image.num_columns == 2
    assert image.area(0, 0, 1, 2) == 5 + 6


def test_row_length_mismatch():
    image = RollingIntegralImage(2)
    image.add_row([1, 2, 3])
    with pytest.raises(ValueError):
        image.add_row([1, 2])


def test_area_out_of_range():
    image = RollingIntegralImage(2)
    image.add_row([1, 2])
    with pytest.raises(ValueError):
        image.area(0, 0, 2, 1)
    with pytest.raises(ValueError):
        image.area(0, 0, 1, 3)


def test_area_of_dropped_rows_raises():
    image = RollingIntegralImage(1)
    for row in ([1, 1], [2, 2], [3, 3], [4, 4]):
        image.add_row(row)
    assert image.area(3, 0, 4, 2) == 4 + 4
    with pytest.raises(ValueError):
        image.area(0, 0, 4, 2)


def test_area_reversed_corners_raise():
    image = RollingIntegralImage(3)
    image.add_row([1, 2])
    image.add_row([3, 4])
    with pytest.raises(ValueError):
        image.area(2, 0, 1, 2)