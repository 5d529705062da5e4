#!/usr/bin/env python3
"""Basic usage example for the filemeta MCP server."""

import asyncio
import json
import os

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


def _result_data(result):
    """Prefer structured content, fall back to the JSON text block."""
    if getattr(result, "structuredContent", None):
        return result.structuredContent
    if result.content and hasattr(result.content[0], "text"):
        return json.loads(result.content[0].text)
    return result.content


async def run_filemeta():
    """Exercise the filemeta MCP server tools."""

    test_file = "Report.CSV"
    with open(test_file, "w") as f:
        f.write("name,value\nalpha,1\n")

    try:
        server_params = StdioServerParameters(command="python", args=["-m", "filemeta"])

        async with stdio_client(server_params) as (read, write):
            async with ClientSession(read, write) as session:
                await session.initialize()

                tools = await session.list_tools()
                print("Available tools:")
                for tool in tools.tools:
                    print(f"  - {tool.name}: {tool.description}")

                print("\n--- Describing file ---")
                try:
                    info = _result_data(await session.call_tool("describe_file", {"file_path": test_file}))
                    print(f"  Filename: {info['filename']}")
                    print(f"  Base name: {info['basename']}, extension: {info['ext']}")
                    print(f"  MIME type: {info['mime']}, {info['size_bytes']} bytes")
                except Exception as e:
                    print(f"  Error with describe_file: {e}")

                print("\n--- Deriving sibling paths ---")
                try:
                    for args in ({"ext": "json"}, {"suffix": "_v2"}):
                        derived = _result_data(
                            await session.call_tool("derive_path", {"file_path": test_file, **args})
                        )
                        print(f"  {args}: {derived['path']}")
                except Exception as e:
                    print(f"  Error with derive_path: {e}")

                print("\n--- Touching file ---")
                try:
                    touched = _result_data(await session.call_tool("touch_file", {"file_path": test_file}))
                    print(f"  Modified: {touched['modified']}")
                except Exception as e:
                    print(f"  Error with touch_file: {e}")

    except Exception as e:
        print(f"Error: {e}")
    finally:
        if os.path.exists(test_file):
            os.remove(test_file)


if __name__ == "__main__":
    asyncio.run(run_filemeta())
