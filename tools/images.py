from core.client import FreepikClient, path_segment
from tools.base import MCPTool, Param
from tools.formatting import bullet_list, task_list, task_report, task_started, unwrap

ASPECT_RATIOS = ("square_1_1", "classic_4_3", "widescreen_16_9", "social_story_9_16")

MYSTIC_PATH = "/ai/mystic"
FLUX_DEV_PATH = "/ai/text-to-image/flux-dev"
REIMAGINE_PATH = "/ai/beta/text-to-image/reimagine-flux"
UPSCALER_PATH = "/ai/image-upscaler"
REMOVE_BACKGROUND_PATH = "/ai/beta/remove-background"
EXPAND_PATH = "/ai/image-expand/flux-pro"

_ADJUSTMENT = dict(minimum=-10, maximum=10)
_EXPANSION = dict(minimum=0, maximum=2048)


def _task_id_param(kind: str) -> Param:
    return Param("task_id", "string", f"Unique identifier for the {kind} task", required=True)


def _webhook_param(description: str = "Optional callback URL for task status updates") -> Param:
    return Param("webhook_url", "string", description)


class TaskStatusTool(MCPTool):
    """GET {path}/{task_id} and report progress or results."""

    path: str
    title: str
    results_heading = "Generated Images"
    pending = "Generation is still in progress."

    def details(self, task):
        return ()

    def execute(self, args, client: FreepikClient) -> str:
        task = unwrap(client.get(f"{self.path}/{path_segment(args['task_id'])}"))
        return task_report(
            self.title,
            task,
            results_heading=self.results_heading,
            pending=self.pending,
            details=self.details(task),
        )


class TaskListTool(MCPTool):
    """GET {path} and list every task with its status."""

    path: str
    title: str
    params = ()

    def execute(self, args, client: FreepikClient) -> str:
        return task_list(self.title, client.get(self.path))


# -------- MYSTIC --------

class GenerateMystic(MCPTool):
    name = "generate_mystic"
    description = "Generate high-resolution images using Freepik's Mystic AI workflow"
    params = (
        Param("prompt", "string", "Text description of desired image", required=True),
        _webhook_param(),
        Param("structure_reference", "string", "Base64 image to influence image shape"),
        Param("style_reference", "string", "Base64 image to influence image aesthetic"),
        Param("resolution", "string", "Image resolution", enum=("1k", "2k", "4k")),
        Param(
            "aspect_ratio", "string", "Image aspect ratio",
            enum=("square_1_1", "widescreen_16_9", "classic_4_3", "social_story_9_16"),
        ),
        Param("model", "string", "Generation model type", enum=("realism", "fluid", "zen")),
    )

    def execute(self, args, client: FreepikClient) -> str:
        task = unwrap(client.post_json(MYSTIC_PATH, {
            key: args[key]
            for key in (
                "prompt", "webhook_url", "structure_reference", "style_reference",
                "resolution", "aspect_ratio", "model",
            )
        }))

        return task_started(
            "Mystic AI Generation Started",
            task,
            [
                ("Prompt", args["prompt"]),
                ("Model", args["model"] or "default"),
                ("Resolution", args["resolution"] or "default"),
            ],
            "Ultra-realistic, high-resolution image generation is running. "
            "Results will be available via webhook or task status check.",
        )


class GetMysticTask(TaskStatusTool):
    name = "get_mystic_task"
    description = "Get status and results of a Mystic generation task"
    params = (_task_id_param("Mystic"),)
    path = MYSTIC_PATH
    title = "Mystic Task Status"

    def details(self, task):
        if task.get("has_nsfw") is None:
            return ()
        return [("NSFW Content", "Yes" if task["has_nsfw"] else "No")]


class ListMysticTasks(TaskListTool):
    name = "list_mystic_tasks"
    description = "List all Mystic generation tasks"
    path = MYSTIC_PATH
    title = "All Mystic Tasks"


# -------- FLUX DEV --------

class GenerateFluxDev(MCPTool):
    name = "generate_flux_dev"
    description = "Generate images using Flux Dev AI model"
    params = (
        Param("prompt", "string", "Text description of desired image", required=True),
        _webhook_param(),
        Param(
            "aspect_ratio", "string", "Image aspect ratio (default: square_1_1)",
            default="square_1_1", enum=ASPECT_RATIOS,
        ),
        Param(
            "styling", "object", "Styling options for the generated image",
            properties={
                "effects": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Visual effects (color, framing, lightning)",
                },
                "color": {"type": "string", "description": "Custom color palette"},
            },
        ),
        Param("seed", "number", "Specific seed for image generation"),
    )

    def execute(self, args, client: FreepikClient) -> str:
        task = unwrap(client.post_json(FLUX_DEV_PATH, {
            "prompt": args["prompt"],
            "webhook_url": args["webhook_url"],
            "aspect_ratio": args["aspect_ratio"],
            "styling": args["styling"],
            "seed": args["seed"],
        }))

        return task_started(
            "Flux Dev Generation Started",
            task,
            [("Prompt", args["prompt"]), ("Aspect Ratio", args["aspect_ratio"])],
            "AI image generation is running. Results will be available via webhook or task status check.",
        )


class GetFluxDevTask(TaskStatusTool):
    name = "get_flux_dev_task"
    description = "Get status and results of a Flux Dev generation task"
    params = (_task_id_param("Flux Dev"),)
    path = FLUX_DEV_PATH
    title = "Flux Dev Task Status"


class ListFluxDevTasks(TaskListTool):
    name = "list_flux_dev_tasks"
    description = "List all Flux Dev generation tasks"
    path = FLUX_DEV_PATH
    title = "All Flux Dev Tasks"


class ReimagineFlux(MCPTool):
    name = "reimagine_flux"
    description = "Reimagine existing images using Flux AI (Beta)"
    params = (
        Param("image", "string", "Base64 encoded image", required=True),
        Param("prompt", "string", "Optional text description for image generation"),
        _webhook_param(),
        Param(
            "imagination", "string", "Creativity level for reimagining",
            enum=("wild", "subtle", "vivid"),
        ),
        Param(
            "aspect_ratio", "string", "Image aspect ratio (default: original)",
            default="original", enum=("original", *ASPECT_RATIOS),
        ),
    )

    def execute(self, args, client: FreepikClient) -> str:
        task = unwrap(client.post_json(REIMAGINE_PATH, {
            "image": args["image"],
            "prompt": args["prompt"],
            "webhook_url": args["webhook_url"],
            "imagination": args["imagination"],
            "aspect_ratio": args["aspect_ratio"],
        }))

        return task_started(
            "Reimagine Flux Started",
            task,
            [
                ("Imagination Level", args["imagination"] or "default"),
                ("Aspect Ratio", args["aspect_ratio"]),
            ],
            "Image reimagining is running. This is a Beta feature.",
        )


# -------- UPSCALER --------

class UpscaleImage(MCPTool):
    name = "upscale_image"
    description = "Upscale images using AI image upscaler"
    params = (
        Param("image", "string", "Base64 encoded image to upscale (max 25.3 million pixels)", required=True),
        _webhook_param("Optional callback URL for task notifications"),
        Param("scale_factor", "string", "Image scaling factor", enum=("2x", "4x", "8x", "16x")),
        Param(
            "optimized_for", "string", "Optimization style",
            enum=("standard", "soft_portraits", "art_n_illustration"),
        ),
        Param("prompt", "string", "Guide the upscaling process"),
        Param("creativity", "number", "AI creativity level (-10 to 10)", **_ADJUSTMENT),
        Param("hdr", "number", "Detail/definition level (-10 to 10)", **_ADJUSTMENT),
        Param("resemblance", "number", "Original image similarity (-10 to 10)", **_ADJUSTMENT),
        Param("fractality", "number", "Prompt strength per pixel (-10 to 10)", **_ADJUSTMENT),
        Param("engine", "string", "Specific Magnific model (e.g., 'magnific_sparkle')"),
    )

    def execute(self, args, client: FreepikClient) -> str:
        task = unwrap(client.post_json(UPSCALER_PATH, {
            key: args[key]
            for key in (
                "image", "webhook_url", "scale_factor", "optimized_for", "prompt",
                "creativity", "hdr", "resemblance", "fractality", "engine",
            )
        }))

        return task_started(
            "Image Upscaling Started",
            task,
            [
                ("Scale Factor", args["scale_factor"] or "default"),
                ("Optimization", args["optimized_for"] or "standard"),
            ],
            "AI image upscaling is running. Results will be available via webhook or task status check.",
        )


class GetUpscalerTask(TaskStatusTool):
    name = "get_upscaler_task"
    description = "Get status and results of an image upscaler task"
    params = (_task_id_param("upscaler"),)
    path = UPSCALER_PATH
    title = "Upscaler Task Status"
    results_heading = "Upscaled Images"
    pending = "Upscaling is still in progress."


class ListUpscalerTasks(TaskListTool):
    name = "list_upscaler_tasks"
    description = "List all image upscaler tasks"
    path = UPSCALER_PATH
    title = "All Upscaler Tasks"


# -------- BACKGROUND REMOVAL --------

class RemoveBackground(MCPTool):
    name = "remove_background"
    description = "Remove background from an image (Beta)"
    params = (
        Param("image_url", "string", "URL of the image to process", required=True),
    )

    def execute(self, args, client: FreepikClient) -> str:
        # this endpoint takes a form body, not JSON
        result = unwrap(client.post_form(REMOVE_BACKGROUND_PATH, {"image_url": args["image_url"]}))

        fields = bullet_list([
            ("Original", result.get("original")),
            ("High Resolution", result.get("high_resolution")),
            ("Preview", result.get("preview")),
            ("Download URL", result.get("url")),
        ])
        return (
            f"**Background Removed Successfully**\n\n{fields}\n\n"
            "*Note: URLs are temporary and valid for only 5 minutes.*"
        )


# -------- EXPAND --------

class ExpandImage(MCPTool):
    name = "expand_image"
    description = "Expand an image using AI Flux Pro model"
    params = (
        Param("image", "string", "Base64 encoded image", required=True),
        Param("prompt", "string", "Text description guiding expansion"),
        Param("left", "number", "Pixels to expand left (max 2048)", **_EXPANSION),
        Param("right", "number", "Pixels to expand right (max 2048)", **_EXPANSION),
        Param("top", "number", "Pixels to expand top (max 2048)", **_EXPANSION),
        Param("bottom", "number", "Pixels to expand bottom (max 2048)", **_EXPANSION),
        _webhook_param(),
    )

    def execute(self, args, client: FreepikClient) -> str:
        task = unwrap(client.post_json(EXPAND_PATH, {
            key: args[key]
            for key in ("image", "prompt", "left", "right", "top", "bottom", "webhook_url")
        }))

        sides = " ".join(
            f"{side.capitalize()}:{args[side] or 0}"
            for side in ("left", "right", "top", "bottom")
        )
        return task_started(
            "Image Expansion Started",
            task,
            [("Expansion", sides)],
            "AI image expansion using Flux Pro is running.",
        )


class GetExpandTask(TaskStatusTool):
    name = "get_expand_task"
    description = "Get status and results of an image expand task"
    params = (_task_id_param("expand"),)
    path = EXPAND_PATH
    title = "Expand Task Status"
    results_heading = "Expanded Images"
    pending = "Expansion is still in progress."


class ListExpandTasks(TaskListTool):
    name = "list_expand_tasks"
    description = "List all image expand tasks"
    path = EXPAND_PATH
    title = "All Expand Tasks"
