def camel_from_snake(v: str) -> str:
    """Convert string from snake to camel case

    Used to map dataclass field names onto the camelCase keys of hook configs.

    :param v: String in snake case
    :return: String in camel case
    """
    head, *tail = v.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in tail)
