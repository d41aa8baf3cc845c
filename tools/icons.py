from core.client import FreepikClient, path_segment
from tools.base import MCPTool, Param
from tools.formatting import task_report, task_started, unwrap

STYLES = ("solid", "outline", "color", "flat", "sticker")

_GENERATION_PARAMS = (
    Param("prompt", "string", "Text description for icon generation", required=True),
    Param("webhook_url", "string", "URL to receive task results", required=True),
)

_TUNING_PARAMS = (
    Param("style", "string", "Icon style", enum=STYLES),
    Param(
        "num_inference_steps", "number", "Generation complexity (10-50)",
        minimum=10, maximum=50,
    ),
    Param(
        "guidance_scale", "number", "Generation precision (0-10)",
        minimum=0, maximum=10,
    ),
)


class GenerateIcon(MCPTool):
    name = "generate_icon"
    description = "Generate AI icons from text prompts using Freepik AI"
    params = (
        *_GENERATION_PARAMS,
        Param("format", "string", "Output format (default: png)", default="png", enum=("png", "svg")),
        *_TUNING_PARAMS,
    )

    def execute(self, args, client: FreepikClient) -> str:
        task = unwrap(client.post_json("/ai/text-to-icon", {
            "prompt": args["prompt"],
            "webhook_url": args["webhook_url"],
            "format": args["format"],
            "style": args["style"],
            "num_inference_steps": args["num_inference_steps"],
            "guidance_scale": args["guidance_scale"],
        }))

        return task_started(
            "AI Icon Generation Started",
            task,
            [
                ("Prompt", args["prompt"]),
                ("Format", args["format"]),
                ("Webhook URL", args["webhook_url"]),
            ],
            "The generation is running. Results will be sent to your webhook URL when complete. "
            "Use the task ID to check status or download the icon.",
        )


class GenerateIconPreview(MCPTool):
    name = "generate_icon_preview"
    description = "Generate AI icon previews from text prompts"
    params = (*_GENERATION_PARAMS, *_TUNING_PARAMS)

    def execute(self, args, client: FreepikClient) -> str:
        task = unwrap(client.post_json("/ai/text-to-icon/preview", {
            "prompt": args["prompt"],
            "webhook_url": args["webhook_url"],
            "style": args["style"],
            "num_inference_steps": args["num_inference_steps"],
            "guidance_scale": args["guidance_scale"],
        }))

        return task_started(
            "AI Icon Preview Generation Started",
            task,
            [("Prompt", args["prompt"]), ("Webhook URL", args["webhook_url"])],
            "Preview generation is running. Results will be sent to your webhook URL when complete.",
        )


class RenderGeneratedIcon(MCPTool):
    name = "render_generated_icon"
    description = "Download generated AI icon in specified format"
    params = (
        Param("task_id", "string", "Unique identifier for the icon generation task", required=True),
        Param(
            "format", "string", "Download format", required=True,
            default="png", enum=("png", "svg"),
        ),
    )

    def execute(self, args, client: FreepikClient) -> str:
        fmt = args["format"]
        task = unwrap(client.post_json(
            f"/ai/text-to-icon/{path_segment(args['task_id'])}/render/{path_segment(fmt)}"
        ))

        return task_report(
            "Generated Icon Status",
            task,
            results_heading="Generated Icons",
            pending="Generation is still in progress. Check back later or wait for webhook notification.",
            details=[("Format", fmt)],
        )
