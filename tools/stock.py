from typing import Any, Dict, List

from core.client import FreepikClient, path_segment
from tools.base import MCPTool, Param
from tools.formatting import bullet_list, download_ready, unwrap

MAX_RESOURCE_LIMIT = 200

ORDER = ("relevance", "recent")


def _meta(payload: Dict[str, Any], *path: str) -> Dict[str, Any]:
    node: Any = payload.get("meta") or {}
    for key in path:
        node = (node.get(key) or {}) if isinstance(node, dict) else {}
    return node if isinstance(node, dict) else {}


# -------- SEARCH --------

class SearchResources(MCPTool):
    name = "search_resources"
    description = "Search for Freepik resources (images, vectors, PSDs) with various filters"
    params = (
        Param("query", "string", "Search query for resources"),
        Param("page", "number", "Page number for pagination (default: 1)", default=1, minimum=1),
        Param(
            "limit", "number",
            "Number of results per page (default: 20, max: 200)",
            default=20, minimum=1,
        ),
        Param(
            "orientation", "string", "Image orientation filter",
            enum=("landscape", "portrait", "square", "panoramic"),
        ),
        Param("order", "string", "Sort order for results (default: relevance)", enum=ORDER),
        Param("license", "string", "License type filter", enum=("freemium", "premium")),
        Param(
            "people_number", "string", "Number of people in the image",
            enum=("none", "one", "two", "group"),
        ),
        Param(
            "people_ethnicity", "string", "Ethnicity filter for people in images",
            enum=(
                "caucasian", "hispanic", "asian", "african", "middle_eastern",
                "native_american", "pacific_islander", "mixed",
            ),
        ),
        Param("ai_generated", "boolean", "Filter for AI-generated content"),
        Param(
            "content_type", "string", "Type of content to search for",
            enum=("photo", "vector", "psd"),
        ),
        Param("color", "string", "Color filter (hex code without #, e.g., 'ff0000' for red)"),
        Param(
            "people_age", "string", "Age group filter for people in images",
            enum=(
                "infants", "children", "teenagers", "twenties", "thirties",
                "forties", "fifties", "sixties", "older",
            ),
        ),
        Param("people_gender", "string", "Gender filter for people in images", enum=("male", "female")),
    )

    def execute(self, args, client: FreepikClient) -> str:
        payload = client.get("/resources", {
            "term": args["query"],
            "page": args["page"],
            "limit": min(args["limit"], MAX_RESOURCE_LIMIT),
            "orientation": args["orientation"],
            "order": args["order"],
            "license": args["license"],
            "content_type": args["content_type"],
            "color": args["color"],
            "people_age": args["people_age"],
            "people_gender": args["people_gender"],
            "people_number": args["people_number"],
            "people_ethnicity": args["people_ethnicity"],
            "ai_generated": args["ai_generated"],
        })

        meta = _meta(payload)
        sections: List[str] = []
        for resource in payload.get("data") or []:
            image = (resource.get("image") or {}).get("source") or {}
            author = resource.get("author") or {}
            sections.append(
                f"**{resource.get('title')}**\n"
                f"- ID: {resource.get('id')}\n"
                f"- Author: {author.get('username')}\n"
                f"- License: {resource.get('license')}\n"
                f"- Image: {image.get('url')}\n"
                f"- URL: {resource.get('url')}"
            )

        header = (
            f"Found {meta.get('total')} resources "
            f"(showing page {meta.get('current_page')} of {meta.get('last_page')}):"
        )
        return header + "\n\n" + "\n\n".join(sections)


class SearchIcons(MCPTool):
    name = "search_icons"
    description = "Search for Freepik icons with various filters"
    params = (
        Param("term", "string", "Search term for icons"),
        Param("slug", "string", "Search by icon slug"),
        Param("page", "number", "Page number for pagination (default: 1)", default=1, minimum=1),
        Param("per_page", "number", "Number of results per page (default: 20)", default=20, minimum=1),
        Param("family_id", "number", "Specific icon family ID"),
        Param("order", "string", "Sort order for results (default: relevance)", enum=ORDER),
        Param("color", "string", "Color filter (e.g., red, blue, multicolor)"),
        Param("shape", "string", "Icon style filter", enum=("outline", "fill")),
        Param("free_svg", "boolean", "Filter for free SVG icons"),
    )

    def execute(self, args, client: FreepikClient) -> str:
        payload = client.get("/icons", {
            "term": args["term"],
            "slug": args["slug"],
            "page": args["page"],
            "per_page": args["per_page"],
            "family-id": args["family_id"],
            "order": args["order"],
            "color": args["color"],
            "shape": args["shape"],
            "free_svg": args["free_svg"],
        })

        pagination = _meta(payload, "pagination")
        sections: List[str] = []
        for icon in payload.get("data") or []:
            thumbnails = icon.get("thumbnails") or {}
            sections.append(
                f"**{icon.get('name')}**\n"
                f"- ID: {icon.get('id')}\n"
                f"- Author: {(icon.get('author') or {}).get('username')}\n"
                f"- Family: {(icon.get('family') or {}).get('name')}\n"
                f"- Tags: {', '.join(str(tag) for tag in icon.get('tags') or [])}\n"
                f"- PNG: {thumbnails.get('png')}\n"
                f"- SVG: {thumbnails.get('svg')}"
            )

        header = (
            f"Found {pagination.get('total')} icons "
            f"(showing page {pagination.get('current_page')} of {pagination.get('last_page')}):"
        )
        return header + "\n\n" + "\n\n".join(sections)


# -------- DOWNLOAD --------

class DownloadIcon(MCPTool):
    name = "download_icon"
    description = "Download a Freepik icon in specified format and size"
    params = (
        Param("icon_id", "number", "Unique icon resource ID", required=True),
        Param(
            "format", "string", "Download format (default: svg)", default="svg",
            enum=("svg", "png", "gif", "mp4", "aep", "json", "psd", "eps"),
        ),
        Param(
            "png_size", "number",
            "PNG size in pixels (default: 512, only applies to PNG format)",
            default=512, enum=(512, 256, 128, 64, 32, 24, 16),
        ),
    )

    def execute(self, args, client: FreepikClient) -> str:
        fmt = args["format"]
        query = {"format": fmt}
        if fmt == "png":
            query["png_size"] = args["png_size"]

        payload = client.get(f"/icons/{path_segment(args['icon_id'])}/download", query)
        return download_ready("Icon Download Ready", unwrap(payload), "Format", fmt)


class DownloadResource(MCPTool):
    name = "download_resource"
    description = "Download a Freepik resource (photo, vector, PSD) by ID"
    params = (
        Param("resource_id", "string", "Unique resource ID", required=True),
        Param(
            "image_size", "string",
            "Resize photo while maintaining aspect ratio (default: original)",
            default="original", enum=("small", "medium", "large", "original"),
        ),
    )

    def execute(self, args, client: FreepikClient) -> str:
        size = args["image_size"]
        query = {"image_size": size} if size != "original" else {}

        payload = client.get(f"/resources/{path_segment(args['resource_id'])}/download", query)
        return download_ready("Resource Download Ready", unwrap(payload), "Image Size", size)


class DownloadResourceFormat(MCPTool):
    name = "download_resource_format"
    description = "Download a Freepik resource in a specific format"
    params = (
        Param("resource_id", "string", "Unique resource ID", required=True),
        Param(
            "format", "string", "Desired download format", required=True,
            enum=("psd", "ai", "eps", "png", "jpg", "svg"),
        ),
    )

    def execute(self, args, client: FreepikClient) -> str:
        fmt = args["format"]
        payload = client.get(
            f"/resources/{path_segment(args['resource_id'])}/download/{path_segment(fmt)}"
        )
        return download_ready("Resource Download Ready", unwrap(payload), "Format", fmt)


# -------- DETAILS --------

class GetResourceDetails(MCPTool):
    name = "get_resource_details"
    description = "Get detailed information about a specific Freepik resource"
    params = (
        Param("resource_id", "string", "The ID of the resource to get details for", required=True),
    )

    def execute(self, args, client: FreepikClient) -> str:
        resource = unwrap(client.get(f"/resources/{path_segment(args['resource_id'])}"))
        image = (resource.get("image") or {}).get("source") or {}

        return "**Resource Details**\n\n" + bullet_list([
            ("ID", resource.get("id")),
            ("Title", resource.get("title")),
            ("Author", (resource.get("author") or {}).get("username")),
            ("License", resource.get("license")),
            ("Image URL", image.get("url")),
            ("Resource URL", resource.get("url")),
        ])
