from typing import Dict, List

from tools.base import MCPTool
from tools.icons import GenerateIcon, GenerateIconPreview, RenderGeneratedIcon
from tools.images import (
    ExpandImage,
    GenerateFluxDev,
    GenerateMystic,
    GetExpandTask,
    GetFluxDevTask,
    GetMysticTask,
    GetUpscalerTask,
    ListExpandTasks,
    ListFluxDevTasks,
    ListMysticTasks,
    ListUpscalerTasks,
    ReimagineFlux,
    RemoveBackground,
    UpscaleImage,
)
from tools.stock import (
    DownloadIcon,
    DownloadResource,
    DownloadResourceFormat,
    GetResourceDetails,
    SearchIcons,
    SearchResources,
)

# Listing order is the order below.
_TOOLS: List[MCPTool] = [
    SearchResources(),
    SearchIcons(),
    DownloadIcon(),
    DownloadResource(),
    DownloadResourceFormat(),
    GenerateIcon(),
    GenerateIconPreview(),
    RenderGeneratedIcon(),
    GenerateMystic(),
    GetMysticTask(),
    ListMysticTasks(),
    GenerateFluxDev(),
    GetFluxDevTask(),
    ListFluxDevTasks(),
    ReimagineFlux(),
    UpscaleImage(),
    GetUpscalerTask(),
    ListUpscalerTasks(),
    RemoveBackground(),
    ExpandImage(),
    GetExpandTask(),
    ListExpandTasks(),
    GetResourceDetails(),
]

TOOL_REGISTRY: Dict[str, MCPTool] = {tool.name: tool for tool in _TOOLS}
