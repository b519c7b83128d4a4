from typing import Any, Iterable, Iterator, List, Sequence, Tuple, Type, Union


def list_of(*args: Any) -> List[Any]:
    """
    Create a list from the argument list.
    """
    return list(args)


def from_array(array: Sequence[Any]) -> List[Any]:
    """
    Create a list containing the elements of an array.
    """
    return list(array)


def from_iterator(iterator: Union[Iterator[Any], Iterable[Any]]) -> List[Any]:
    """
    Create a list containing the remaining elements of an iterator.
    """
    return list(iterator)


def from_csv(csv: str) -> List[str]:
    """
    Create a list containing the elements of a comma separated string.
    Empty elements are skipped, like consecutive delimiters of a tokenizer.

    Example:
        from_csv("a,,b,")  --> ["a", "b"]
    """
    return [token for token in csv.split(",") if token]


def immutable_list_of_type(items: Iterable[Any], item_type: Union[Type, Tuple[Type, ...]]) -> Tuple[Any, ...]:
    """
    Check that all elements are of the specified type and return an immutable copy.

    Args:
        items: The elements to check.
        item_type: Class (or tuple of classes) every element must be an instance of.

    Raises:
        ValueError: If an element is None.
        TypeError: If an element is not of the proper type.
    """
    return _immutable_list_of_type(items, item_type, False)


def immutable_list_of_type_or_null(items: Iterable[Any], item_type: Union[Type, Tuple[Type, ...]]) -> Tuple[Any, ...]:
    """
    Like :func:`immutable_list_of_type`, but None elements are allowed.
    """
    return _immutable_list_of_type(items, item_type, True)


def _immutable_list_of_type(items, item_type, null_ok: bool) -> Tuple[Any, ...]:
    if items is None:
        raise ValueError("list is None")
    result = []
    for item in items:
        if item is None:
            if not null_ok:
                raise ValueError("item of list is None")
        elif not isinstance(item, item_type):
            raise TypeError(f"item <{item!r}> of list is not an instance of {item_type}")
        result.append(item)
    return tuple(result)


def reverse_copy(items: Sequence[Any]) -> List[Any]:
    """
    Return a copy of the list, in reverse order.
    """
    return list(reversed(items))
