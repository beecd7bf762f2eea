"""
CSS styles for the IT Asset Tracker.
Pure string data, no runtime dependencies.
"""


def get_anti_flicker_css():
    """CSS that hides all UI until auth is resolved. Runs first to prevent flash."""
    return """
<style>
.stApp { opacity: 0 !important; }

[data-testid="stSidebar"],
[data-testid="stSidebarNav"],
section[data-testid="stSidebar"] {
    display: none !important;
}
</style>
"""


def get_login_css():
    """Login page: no sidebar, centered card."""
    return """
    <style>
    #MainMenu, footer, header, [data-testid="stToolbar"], [data-testid="stDecoration"],
    [data-testid="stSidebar"], [data-testid="stSidebarNav"], section[data-testid="stSidebar"],
    [data-testid="collapsedControl"] {
        display: none !important;
        visibility: hidden !important;
    }

    .stApp {
        opacity: 1 !important;
        background: #f1f5f9 !important;
        min-height: 100vh;
    }

    [data-testid="stAppViewContainer"],
    [data-testid="stMain"] {
        margin-left: 0 !important;
        padding-left: 0 !important;
        width: 100% !important;
    }

    .login-brand {
        text-align: center;
        margin-bottom: 24px;
    }
    .login-brand-title {
        font-size: 2rem;
        font-weight: 700;
        color: #1e293b;
        margin: 0;
    }
    .login-brand-tagline {
        color: #64748b;
        font-size: 0.95rem;
        margin-top: 4px;
    }

    [data-testid="stForm"] {
        background: #ffffff;
        border: 1px solid #e2e8f0;
        border-radius: 12px;
        padding: 28px 32px !important;
        box-shadow: 0 4px 12px rgba(15, 23, 42, 0.06);
    }

    .login-demo {
        margin-top: 16px;
        padding: 12px 16px;
        background: #f8fafc;
        border: 1px dashed #cbd5e1;
        border-radius: 8px;
        font-size: 0.8rem;
        color: #64748b;
        text-align: center;
    }
    .login-demo-title {
        font-weight: 600;
        margin: 0 0 6px 0;
    }
    </style>
"""


def get_dashboard_css():
    """Design tokens and component styles for signed-in pages."""
    return """
<style>
    .stApp { opacity: 1 !important; }

    [data-testid="stSidebar"],
    [data-testid="stSidebarNav"],
    section[data-testid="stSidebar"] {
        display: flex !important;
        visibility: visible !important;
    }

    :root {
        --color-bg-primary: #ffffff;
        --color-bg-secondary: #f8fafc;
        --color-border: #e2e8f0;
        --color-text-primary: #0f172a;
        --color-text-muted: #64748b;
        --color-accent: #2563eb;
        --color-success: #10b981;
        --color-warning: #f59e0b;
        --color-danger: #ef4444;
        --radius-md: 10px;
    }

    /* Sidebar */
    section[data-testid="stSidebar"] {
        background: #0f172a !important;
    }
    section[data-testid="stSidebar"] * {
        color: #e2e8f0;
    }
    .sidebar-brand {
        padding: 8px 4px 16px 4px;
        border-bottom: 1px solid #1e293b;
        margin-bottom: 8px;
    }
    .sidebar-brand-title {
        font-size: 1.15rem;
        font-weight: 700;
        margin: 0;
    }
    .sidebar-brand p {
        font-size: 0.8rem;
        margin: 0;
        opacity: 0.7;
    }
    .nav-section-header {
        font-size: 0.68rem;
        letter-spacing: 0.08em;
        opacity: 0.55;
        margin: 14px 4px 4px 4px;
    }
    section[data-testid="stSidebar"] .stButton > button {
        width: 100%;
        justify-content: flex-start;
        border: none;
        background: transparent;
    }
    section[data-testid="stSidebar"] .stButton > button[kind="primary"] {
        background: var(--color-accent);
    }
    .user-info-card {
        margin-top: 20px;
        padding: 12px;
        border-radius: var(--radius-md);
        background: #1e293b;
    }
    .user-name { font-weight: 600; }
    .user-email { font-size: 0.75rem; opacity: 0.7; margin-bottom: 6px; }
    .role-badge-compact {
        display: inline-block;
        font-size: 0.7rem;
        padding: 2px 8px;
        border-radius: 999px;
        background: #334155;
    }
    .role-badge-compact.admin { background: #1d4ed8; }
    .role-badge-compact.hr { background: #047857; }
    .role-badge-compact.director { background: #7c3aed; }
    .sidebar-footer {
        margin-top: 24px;
        font-size: 0.7rem;
        opacity: 0.5;
    }

    /* Page header */
    .page-header h1 {
        font-size: 1.6rem;
        font-weight: 700;
        color: var(--color-text-primary);
        margin-bottom: 0;
    }
    .page-header p {
        color: var(--color-text-muted);
        margin-top: 2px;
    }

    /* Stat cards */
    .stat-card {
        background: var(--color-bg-primary);
        border: 1px solid var(--color-border);
        border-radius: var(--radius-md);
        padding: 16px;
    }
    .stat-card .stat-label {
        font-size: 0.8rem;
        color: var(--color-text-muted);
    }
    .stat-card .stat-value {
        font-size: 1.6rem;
        font-weight: 700;
        color: var(--color-text-primary);
    }
    .stat-card.success { border-left: 4px solid var(--color-success); }
    .stat-card.warning { border-left: 4px solid var(--color-warning); }
    .stat-card.danger { border-left: 4px solid var(--color-danger); }
    .stat-card.info { border-left: 4px solid var(--color-accent); }

    /* Badges */
    .status-badge {
        display: inline-block;
        padding: 2px 10px;
        border-radius: 999px;
        font-size: 0.75rem;
        font-weight: 600;
        color: #ffffff;
    }

    /* Wizard progress */
    .wizard-steps {
        display: flex;
        gap: 8px;
        margin-bottom: 16px;
    }
    .wizard-step {
        flex: 1;
        text-align: center;
        font-size: 0.8rem;
        padding: 6px 0;
        border-bottom: 3px solid var(--color-border);
        color: var(--color-text-muted);
    }
    .wizard-step.done { border-color: var(--color-success); }
    .wizard-step.current {
        border-color: var(--color-accent);
        color: var(--color-text-primary);
        font-weight: 600;
    }

    /* Empty state */
    .empty-state {
        text-align: center;
        padding: 40px 20px;
        color: var(--color-text-muted);
        border: 1px dashed var(--color-border);
        border-radius: var(--radius-md);
        background: var(--color-bg-secondary);
    }
    .empty-state .empty-icon { font-size: 2rem; }
    .empty-state .empty-title {
        font-weight: 600;
        color: var(--color-text-primary);
        margin: 8px 0 4px 0;
    }
</style>
"""
