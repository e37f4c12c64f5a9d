"""
Demo Catalog - dados fixos retornados pelo servidor mock.

Os timestamps são gerados no momento da chamada (como a API original),
o restante do conteúdo é estático.
"""
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from src.domain.entities import (
    Caption,
    OriginalFile,
    ProcessingStatus,
    Project,
    Template,
    Transcript,
    User,
    Video,
    Workspace
)
from src.domain.value_objects import ProcessingStage, VideoStatus

DEMO_USER_ID = "1"
PLACEHOLDER = "https://via.placeholder.com"


class DemoCatalog:
    """Fonte única dos payloads demo."""

    def __init__(self, clock=None):
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def _now(self) -> datetime:
        return self._clock()

    def _ago(self, **delta) -> datetime:
        return self._now() - timedelta(**delta)

    # ----- Users -----

    def demo_user(
        self,
        email: str,
        first_name: str = "Demo",
        last_name: str = "User"
    ) -> User:
        return User(
            id=DEMO_USER_ID,
            email=email,
            first_name=first_name,
            last_name=last_name,
            role="owner"
        )

    # ----- Workspaces -----

    def workspaces(self) -> List[Workspace]:
        now = self._now()
        return [
            Workspace(
                id="1",
                name="Demo Workspace",
                description="A sample workspace",
                owner=DEMO_USER_ID,
                projects=["1", "2"],
                created_at=now,
                updated_at=now
            ),
            Workspace(
                id="2",
                name="Marketing Team",
                description="Launch videos and product walkthroughs",
                owner=DEMO_USER_ID,
                members=[{"user": "2", "role": "editor"}],
                projects=["3"],
                created_at=now,
                updated_at=now
            )
        ]

    def workspace(self, workspace_id: str) -> Workspace:
        """Workspace demo com o ID solicitado."""
        base = self.workspaces()[0]
        base.id = workspace_id
        return base

    # ----- Projects -----

    def projects(self) -> List[Project]:
        now = self._now()
        return [
            Project(
                id="1",
                name="Demo Project",
                description="A sample project for demonstration",
                workspace={"name": "Demo Workspace"},
                created_at=now,
                updated_at=now
            ),
            Project(
                id="2",
                name="Product Onboarding",
                description="Step-by-step onboarding tutorials",
                workspace={"name": "Demo Workspace"},
                created_at=now,
                updated_at=now
            ),
            Project(
                id="3",
                name="Release Walkthrough",
                description="Feature highlights for the next release",
                workspace={"name": "Marketing Team"},
                created_at=now,
                updated_at=now
            )
        ]

    def project(self, project_id: str) -> Project:
        now = self._now()
        return Project(
            id=project_id,
            name="Demo Project",
            description="A sample project",
            workspace={"_id": "1", "name": "Demo Workspace"},
            owner=DEMO_USER_ID,
            created_at=now,
            updated_at=now
        )

    def project_activity(self, project_id: str) -> List[dict]:
        return [
            {
                "_id": "1",
                "user": {"name": "Demo User", "avatar": None},
                "action": "uploaded video",
                "target": "Tutorial Video.mp4",
                "timestamp": self._ago(minutes=30).isoformat()
            },
            {
                "_id": "2",
                "user": {"name": "Demo User", "avatar": None},
                "action": "edited script",
                "target": "Introduction",
                "timestamp": self._ago(hours=1).isoformat()
            }
        ]

    # ----- Videos -----

    def videos(self) -> List[Video]:
        now = self._now()
        return [
            Video(
                id="1",
                title="Demo Video",
                description="A sample video",
                project="1",
                status=VideoStatus.READY,
                created_at=now,
                updated_at=now
            ),
            Video(
                id="2",
                title="Onboarding Tour",
                description="Walkthrough of the dashboard",
                project="2",
                status=VideoStatus.READY,
                created_at=now,
                updated_at=now
            ),
            Video(
                id="3",
                title="Release Highlights",
                description="New features in this release",
                project="3",
                status=VideoStatus.PROCESSING,
                processing=ProcessingStatus(stage=ProcessingStage.GENERATE_CAPTIONS, progress=60),
                created_at=now,
                updated_at=now
            )
        ]

    def video_detail(self, video_id: str) -> Video:
        """Vídeo demo completo (transcrição, legendas, keyframes)."""
        now = self._now()
        return Video(
            id=video_id,
            title="Demo Video",
            description="A sample video",
            project="1",
            status=VideoStatus.READY,
            original_file=OriginalFile(
                url="https://example.com/video.mp4",
                duration=120,
                format="mp4",
                size=1024000
            ),
            transcript=Transcript(
                original_text="This is a demo transcript of the video content.",
                enhanced_text=(
                    "This is an AI-enhanced version of the transcript with "
                    "improved clarity and structure."
                )
            ),
            captions=[
                Caption(id="1", start=0, end=5, text="Welcome to this demo video"),
                Caption(id="2", start=5, end=10, text="This shows the caption functionality")
            ],
            keyframes=[
                {"timestamp": 0, "thumbnail": f"{PLACEHOLDER}/640x360?text=Frame+1"},
                {"timestamp": 30, "thumbnail": f"{PLACEHOLDER}/640x360?text=Frame+2"},
                {"timestamp": 60, "thumbnail": f"{PLACEHOLDER}/640x360?text=Frame+3"}
            ],
            created_at=now,
            updated_at=now
        )

    # ----- Templates -----

    @staticmethod
    def _template_data(colors: List[str], fonts: List[str]) -> dict:
        return {
            "scenes": [
                {"id": "intro", "type": "intro", "duration": 5, "elements": [
                    {"type": "text", "properties": {"content": "Title", "animation": "fade-in"}}
                ]},
                {"id": "content", "type": "content", "duration": 60, "elements": [
                    {"type": "video", "properties": {"fit": "cover"}}
                ]},
                {"id": "outro", "type": "outro", "duration": 5, "elements": [
                    {"type": "text", "properties": {"content": "Thanks for watching"}}
                ]}
            ],
            "style": {"colors": colors, "fonts": fonts, "animations": ["fade-in", "slide-up"]},
            "settings": {"aspectRatio": "16:9", "resolution": "1920x1080"}
        }

    def all_templates(self) -> List[Template]:
        return [
            Template(
                id="1",
                name="Tutorial Template",
                description="Perfect for educational content",
                category="Education",
                thumbnail=f"{PLACEHOLDER}/300x200?text=Tutorial",
                features=["Intro/Outro", "Captions", "Chapters"],
                tags=["tutorial", "education", "how-to"],
                rating=4.8,
                views=1520,
                downloads=340,
                template_data=self._template_data(["#1E3A8A", "#FFFFFF"], ["Inter"])
            ),
            Template(
                id="2",
                name="Product Demo",
                description="Showcase your product features",
                category="Business",
                thumbnail=f"{PLACEHOLDER}/300x200?text=Product+Demo",
                features=["Highlights", "Call-to-Action", "Branding"],
                tags=["product", "saas", "walkthrough"],
                rating=4.6,
                views=2310,
                downloads=280,
                template_data=self._template_data(["#7C3AED", "#F5F3FF"], ["Poppins"])
            ),
            Template(
                id="3",
                name="Social Media",
                description="Optimized for social platforms",
                category="Marketing",
                thumbnail=f"{PLACEHOLDER}/300x200?text=Social+Media",
                features=["Square Format", "Subtitles", "Music"],
                tags=["social", "short-form", "vertical"],
                rating=4.2,
                views=980,
                downloads=510,
                template_data=self._template_data(["#EC4899", "#111827"], ["Montserrat"])
            )
        ]

    def templates(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None
    ) -> List[Template]:
        templates = self.all_templates()
        if category and category.lower() != "all":
            templates = [t for t in templates if t.category.lower() == category.lower()]
        if search:
            templates = [t for t in templates if t.matches(search)]
        return templates

    def template(self, template_id: str) -> Optional[Template]:
        return next((t for t in self.all_templates() if t.id == template_id), None)

    # ----- Tutorials / Help -----

    def tutorials(self) -> List[dict]:
        return [
            {
                "id": "getting_started",
                "title": "Getting Started with Clueso",
                "description": "Learn the basics of creating and editing videos",
                "duration": "3 min",
                "category": "basics",
                "videoUrl": "/tutorials/getting-started.mp4",
                "steps": [
                    "Create your first project",
                    "Upload or record a video",
                    "Use basic editing tools",
                    "Export your video"
                ]
            },
            {
                "id": "ai_tools",
                "title": "AI-Powered Editing",
                "description": "Discover how to use AI tools for video enhancement",
                "duration": "5 min",
                "category": "ai",
                "videoUrl": "/tutorials/ai-tools.mp4",
                "steps": [
                    "Enhance scripts with AI",
                    "Generate captions automatically",
                    "Apply AI-powered cuts",
                    "Use voice enhancement"
                ]
            },
            {
                "id": "collaboration",
                "title": "Team Collaboration",
                "description": "Work together with your team on video projects",
                "duration": "4 min",
                "category": "collaboration",
                "videoUrl": "/tutorials/collaboration.mp4",
                "steps": [
                    "Create workspaces",
                    "Invite team members",
                    "Share projects",
                    "Manage permissions"
                ]
            },
            {
                "id": "advanced_editing",
                "title": "Advanced Editing Features",
                "description": "Master advanced video editing techniques",
                "duration": "7 min",
                "category": "advanced",
                "videoUrl": "/tutorials/advanced-editing.mp4",
                "steps": [
                    "Timeline management",
                    "Multi-track editing",
                    "Effects and transitions",
                    "Audio synchronization"
                ]
            },
            {
                "id": "export_share",
                "title": "Export and Sharing",
                "description": "Learn different ways to export and share your videos",
                "duration": "3 min",
                "category": "basics",
                "videoUrl": "/tutorials/export-share.mp4",
                "steps": [
                    "Choose export settings",
                    "Download videos",
                    "Share via link",
                    "Embed in websites"
                ]
            }
        ]

    def help_articles(self) -> List[dict]:
        def updated(day: int) -> str:
            return datetime(2024, 1, day, tzinfo=timezone.utc).isoformat()

        return [
            {
                "id": "video_formats",
                "title": "Supported Video Formats",
                "category": "technical",
                "content": "Learn about supported video formats and best practices for uploading.",
                "tags": ["video", "formats", "upload"],
                "lastUpdated": updated(15)
            },
            {
                "id": "ai_enhancement",
                "title": "How AI Enhancement Works",
                "category": "ai",
                "content": "Understand how our AI tools enhance your video content automatically.",
                "tags": ["ai", "enhancement", "automation"],
                "lastUpdated": updated(20)
            },
            {
                "id": "team_management",
                "title": "Managing Team Workspaces",
                "category": "collaboration",
                "content": "Complete guide to creating and managing team workspaces.",
                "tags": ["team", "workspace", "collaboration"],
                "lastUpdated": updated(18)
            },
            {
                "id": "export_options",
                "title": "Export Settings Guide",
                "category": "export",
                "content": "Choose the right export settings for different platforms.",
                "tags": ["export", "settings", "quality"],
                "lastUpdated": updated(22)
            },
            {
                "id": "keyboard_shortcuts",
                "title": "Keyboard Shortcuts",
                "category": "productivity",
                "content": "Speed up your workflow with keyboard shortcuts.",
                "tags": ["shortcuts", "productivity", "workflow"],
                "lastUpdated": updated(10)
            },
            {
                "id": "troubleshooting",
                "title": "Common Issues and Solutions",
                "category": "support",
                "content": "Solutions to frequently encountered problems.",
                "tags": ["troubleshooting", "issues", "support"],
                "lastUpdated": updated(25)
            }
        ]

    # ----- Analytics -----

    def analytics_overview(self) -> dict:
        return {
            "totalVideos": 12,
            "totalProjects": 5,
            "totalWorkspaces": 2,
            "processingVideos": 2,
            "storageUsed": "2.5 GB",
            "storageLimit": "10 GB",
            "recentActivity": [
                {
                    "type": "video_created",
                    "message": "New video uploaded",
                    "timestamp": self._ago(hours=1).isoformat()
                },
                {
                    "type": "project_created",
                    "message": "New project created",
                    "timestamp": self._ago(hours=2).isoformat()
                }
            ]
        }
