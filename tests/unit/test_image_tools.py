import pytest

IN_PROGRESS = "is still in progress"
COMPLETED_EMPTY = "Task completed but no images were generated."


@pytest.mark.unit
def test_get_mystic_task_completed_without_images(server, upstream):
    upstream.payload = {"data": {"task_id": "m-1", "status": "COMPLETED", "generated": []}}

    result = server.call_tool("get_mystic_task", {"task_id": "m-1"})

    assert upstream.last.url.path == "/v1/ai/mystic/m-1"
    assert COMPLETED_EMPTY in result.text
    assert IN_PROGRESS not in result.text


@pytest.mark.unit
def test_get_mystic_task_in_progress(server, upstream):
    upstream.payload = {"data": {"task_id": "m-1", "status": "IN_PROGRESS", "generated": []}}

    result = server.call_tool("get_mystic_task", {"task_id": "m-1"})

    assert "*Generation is still in progress.*" in result.text
    assert COMPLETED_EMPTY not in result.text


@pytest.mark.unit
def test_get_mystic_task_reports_nsfw_and_images(server, upstream):
    upstream.payload = {
        "data": {
            "task_id": "m-1",
            "status": "COMPLETED",
            "has_nsfw": False,
            "generated": ["https://cdn/1.png"],
        }
    }

    result = server.call_tool("get_mystic_task", {"task_id": "m-1"})

    assert result.text == (
        "**Mystic Task Status**\n\n"
        "- **Task ID**: m-1\n"
        "- **Status**: COMPLETED\n"
        "- **NSFW Content**: No\n\n"
        "**Generated Images:**\n"
        "1. https://cdn/1.png"
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "tool, path, heading, pending",
    [
        ("get_flux_dev_task", "/v1/ai/text-to-image/flux-dev/x", "Generated Images", "Generation"),
        ("get_upscaler_task", "/v1/ai/image-upscaler/x", "Upscaled Images", "Upscaling"),
        ("get_expand_task", "/v1/ai/image-expand/flux-pro/x", "Expanded Images", "Expansion"),
    ],
)
def test_task_status_tools(server, upstream, tool, path, heading, pending):
    upstream.payload = {"data": {"task_id": "x", "status": "IN_PROGRESS"}}
    result = server.call_tool(tool, {"task_id": "x"})
    assert upstream.last.url.path == path
    assert f"*{pending} is still in progress.*" in result.text

    upstream.payload = {"data": {"task_id": "x", "status": "COMPLETED", "generated": ["u"]}}
    result = server.call_tool(tool, {"task_id": "x"})
    assert f"**{heading}:**\n1. u" in result.text


@pytest.mark.unit
@pytest.mark.parametrize(
    "tool, path, title",
    [
        ("list_mystic_tasks", "/v1/ai/mystic", "All Mystic Tasks"),
        ("list_flux_dev_tasks", "/v1/ai/text-to-image/flux-dev", "All Flux Dev Tasks"),
        ("list_upscaler_tasks", "/v1/ai/image-upscaler", "All Upscaler Tasks"),
        ("list_expand_tasks", "/v1/ai/image-expand/flux-pro", "All Expand Tasks"),
    ],
)
def test_list_task_tools_keep_upstream_order(server, upstream, tool, path, title):
    upstream.payload = {"data": [
        {"task_id": "b", "status": "COMPLETED"},
        {"task_id": "a", "status": "IN_PROGRESS"},
    ]}

    result = server.call_tool(tool, {})

    assert upstream.last.method == "GET"
    assert upstream.last.url.path == path
    assert result.text == (
        f"**{title}**\n\n"
        "1. **b** - Status: COMPLETED\n"
        "2. **a** - Status: IN_PROGRESS"
    )


@pytest.mark.unit
def test_list_tasks_empty(server, upstream):
    upstream.payload = {"data": []}
    result = server.call_tool("list_upscaler_tasks", {})
    assert result.text == "**All Upscaler Tasks**\n\n*No tasks found.*"


@pytest.mark.unit
def test_generate_mystic_sends_only_given_fields(server, upstream):
    upstream.payload = {"data": {"task_id": "m-9", "status": "CREATED"}}

    result = server.call_tool("generate_mystic", {"prompt": "castle", "resolution": "2k"})

    assert upstream.last.url.path == "/v1/ai/mystic"
    assert upstream.last_json() == {"prompt": "castle", "resolution": "2k"}
    assert "- **Model**: default\n- **Resolution**: 2k" in result.text


@pytest.mark.unit
def test_generate_flux_dev_applies_default_aspect_ratio(server, upstream):
    upstream.payload = {"data": {"task_id": "f-1", "status": "CREATED"}}

    server.call_tool(
        "generate_flux_dev",
        {"prompt": "city", "styling": {"effects": ["framing"], "color": "warm"}, "seed": 42},
    )

    assert upstream.last_json() == {
        "prompt": "city",
        "aspect_ratio": "square_1_1",
        "styling": {"effects": ["framing"], "color": "warm"},
        "seed": 42,
    }


@pytest.mark.unit
def test_reimagine_flux(server, upstream):
    upstream.payload = {"data": {"task_id": "r-1", "status": "CREATED"}}

    result = server.call_tool("reimagine_flux", {"image": "aGVsbG8=", "imagination": "wild"})

    assert upstream.last.url.path == "/v1/ai/beta/text-to-image/reimagine-flux"
    assert upstream.last_json() == {"image": "aGVsbG8=", "imagination": "wild", "aspect_ratio": "original"}
    assert "- **Imagination Level**: wild\n- **Aspect Ratio**: original" in result.text


@pytest.mark.unit
def test_upscale_image_keeps_zero_adjustments(server, upstream):
    upstream.payload = {"data": {"task_id": "u-1", "status": "CREATED"}}

    result = server.call_tool("upscale_image", {"image": "aGk=", "scale_factor": "4x", "creativity": 0, "hdr": -3})

    body = upstream.last_json()
    assert body == {"image": "aGk=", "scale_factor": "4x", "creativity": 0, "hdr": -3}
    assert "- **Scale Factor**: 4x\n- **Optimization**: standard" in result.text


@pytest.mark.unit
def test_upscale_image_rejects_out_of_range(server, upstream):
    result = server.call_tool("upscale_image", {"image": "aGk=", "fractality": 11})
    assert result.text.startswith("Error: Invalid arguments for upscale_image: fractality")
    assert upstream.requests == []


@pytest.mark.unit
def test_remove_background_sends_form_and_four_urls(server, upstream):
    upstream.payload = {
        "original": "https://r/original.png",
        "high_resolution": "https://r/hd.png",
        "preview": "https://r/preview.png",
        "url": "https://r/download.png",
    }
    image_url = "https://example.com/a photo.jpg?x=1&y=2"

    result = server.call_tool("remove_background", {"image_url": image_url})

    assert upstream.last.url.path == "/v1/ai/beta/remove-background"
    assert upstream.last.headers["content-type"] == "application/x-www-form-urlencoded"
    assert upstream.last_form() == {"image_url": [image_url]}
    assert upstream.last.content.startswith(b"image_url=https%3A%2F%2F")

    url_lines = [line for line in result.text.splitlines() if line.startswith("- **")]
    assert url_lines == [
        "- **Original**: https://r/original.png",
        "- **High Resolution**: https://r/hd.png",
        "- **Preview**: https://r/preview.png",
        "- **Download URL**: https://r/download.png",
    ]


@pytest.mark.unit
def test_expand_image_reports_sides(server, upstream):
    upstream.payload = {"data": {"task_id": "e-1", "status": "CREATED"}}

    result = server.call_tool("expand_image", {"image": "aGk=", "left": 100, "top": 0})

    assert upstream.last.url.path == "/v1/ai/image-expand/flux-pro"
    assert upstream.last_json() == {"image": "aGk=", "left": 100, "top": 0}
    assert "- **Expansion**: Left:100 Right:0 Top:0 Bottom:0" in result.text


@pytest.mark.unit
def test_upscale_image_keeps_fractional_adjustments(server, upstream):
    upstream.payload = {"data": {"task_id": "t-1", "status": "CREATED"}}

    server.call_tool("upscale_image", {"image": "aGVsbG8=", "creativity": 2.5, "hdr": 3.0})

    body = upstream.last_json()
    assert body["creativity"] == 2.5
    assert body["hdr"] == 3
    assert isinstance(body["hdr"], int)
