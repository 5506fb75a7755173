# Convert simulation reports to and from JSON (for export and plotting)
import json
from pathlib import Path


def to_json(data_dict: dict) -> str:
    """
    Convert a dictionary to a JSON string.
    Args:
        data_dict (dict): The dictionary to convert.
    Returns:
        str: The JSON string representation of the dictionary.
    """
    return json.dumps(data_dict, indent=2)


def from_json(json_string: str) -> dict:
    """
    Convert a JSON string back to a dictionary.
    Args:
        json_string (str): The JSON string to convert.
    Returns:
        dict: The resulting dictionary.
    """
    return json.loads(json_string)


def write_report(data_dict: dict, path) -> Path:
    """
    Write a report dictionary to disk as JSON.
    Args:
        data_dict (dict): The report to write.
        path (str | Path): Target file path.
    Returns:
        Path: The written path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(to_json(data_dict))
    return path


def read_report(path) -> dict:
    """
    Read a JSON report from disk.
    Args:
        path (str | Path): The file to read.
    Returns:
        dict: The loaded report.
    """
    with open(Path(path), "r", encoding="utf-8") as f:
        return from_json(f.read())
