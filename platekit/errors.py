"""Исключения библиотеки номерных знаков."""


class InvalidArgument(ValueError):
    """Аргумент конструктора номера не прошёл проверку предусловий."""
