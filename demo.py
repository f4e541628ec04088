#!/usr/bin/env python3
"""
ProjectStore Demo Script

Walks through the project record operations:
1. Adding projects
2. Viewing and updating a project
3. Filtering by cost and counting by criteria
4. Deleting a project

Usage:
    # Start the API server first
    uvicorn projectstore.api.main:app --reload

    # Run demo
    python demo.py
"""

import asyncio
import json
import sys

import httpx

BASE_URL = "http://localhost:8000"
API_V1 = f"{BASE_URL}/api/v1"

DEMO_PROJECTS = [
    {"name": "Bridge", "area": "Civil", "cost": 1500.0},
    {"name": "Tunnel", "area": "Civil", "cost": 3000.0},
]


def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}\n")


def print_json(data: dict) -> None:
    """Pretty print JSON data."""
    print(json.dumps(data, indent=2, default=str))


def print_projects(data: dict) -> None:
    for project in data["projects"]:
        print(f"  - {project['name']} ({project['area']}): {project['cost']:.2f}")
    for skipped in data["skipped"]:
        print(f"  ! skipped {skipped['source']}: {skipped['reason']}")


async def check_server() -> bool:
    """Check if server is running."""
    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(f"{BASE_URL}/health", timeout=5.0)
            return response.status_code == 200
    except httpx.HTTPError:
        return False


async def demo_add(client: httpx.AsyncClient) -> None:
    """Demo: Adding projects"""
    print_header("1. ADDING PROJECTS")

    for project in DEMO_PROJECTS:
        print(f"Adding '{project['name']}' ({project['area']}, {project['cost']:.2f})...")
        response = await client.post(f"{API_V1}/projects", json=project)
        if response.status_code == 409:
            print("  Already exists")
        else:
            response.raise_for_status()
            print("  Added")

    print("\nAdding 'Bridge' again...")
    response = await client.post(f"{API_V1}/projects", json=DEMO_PROJECTS[0])
    print(f"  {response.status_code}: {response.json()['detail']}")


async def demo_view_update(client: httpx.AsyncClient) -> None:
    """Demo: Viewing and updating"""
    print_header("2. VIEW AND UPDATE")

    response = await client.get(f"{API_V1}/projects/Tunnel")
    response.raise_for_status()
    print("Tunnel:")
    print_json(response.json())

    print("\nUpdating Tunnel cost to '3250,5' (comma decimal)...")
    response = await client.put(
        f"{API_V1}/projects/Tunnel",
        json={"area": "Civil", "cost": "3250,5"},
    )
    response.raise_for_status()
    print_json(response.json())


async def demo_queries(client: httpx.AsyncClient) -> None:
    """Demo: Filtering and counting"""
    print_header("3. QUERIES")

    print("Projects costing more than 2000:")
    response = await client.get(f"{API_V1}/projects", params={"min_cost": 2000.0})
    print_projects(response.json())

    print("\nCivil projects costing at least 1500:")
    response = await client.get(
        f"{API_V1}/projects/count",
        params={"min_cost": 1500.0, "area": "Civil"},
    )
    print(f"  Count: {response.json()['count']}")


async def demo_delete(client: httpx.AsyncClient) -> None:
    """Demo: Deleting"""
    print_header("4. DELETE")

    print("Deleting 'Bridge'...")
    response = await client.delete(f"{API_V1}/projects/Bridge")
    print(f"  Status: {response.status_code}")

    print("\nAll projects (by name):")
    response = await client.get(f"{API_V1}/projects", params={"sort": "name"})
    print_projects(response.json())


async def cleanup(client: httpx.AsyncClient) -> None:
    """Cleanup demo resources."""
    print_header("CLEANUP")

    for project in DEMO_PROJECTS:
        await client.delete(f"{API_V1}/projects/{project['name']}")
    print("  Done")


async def main() -> None:
    """Run the demo."""
    print("\n" + "=" * 60)
    print("        ProjectStore Demo - Project Records")
    print("=" * 60)

    # Check server
    print("\nChecking API server...")
    if not await check_server():
        print("ERROR: Server not running!")
        print("\nStart the server first:")
        print("  uvicorn projectstore.api.main:app --reload")
        sys.exit(1)

    print("  Server is running at", BASE_URL)

    async with httpx.AsyncClient(timeout=30.0) as client:
        try:
            await demo_add(client)
            await demo_view_update(client)
            await demo_queries(client)
            await demo_delete(client)
            await cleanup(client)
        except httpx.HTTPError as e:
            print(f"\nHTTP Error: {e}")
            sys.exit(1)

    print_header("DEMO COMPLETE")
    print("\nExplore more:")
    print("  - Swagger UI: http://localhost:8000/docs")
    print("  - ReDoc: http://localhost:8000/redoc")


if __name__ == "__main__":
    asyncio.run(main())
