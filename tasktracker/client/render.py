from jinja2 import Environment

# autoescape: titles are inserted as text, never as markup
_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

_TEMPLATE = _env.from_string(
    """\
<ul id="tasksList">
{% for task in tasks %}
  <li class="task-item{{ ' completed' if task.completed }}" data-id="{{ task.id }}">
    <input type="checkbox" name="completed" data-id="{{ task.id }}"{{ ' checked' if task.completed }} />
    <span class="task-title">{{ task.title }}</span>
    <button type="button" class="delete-btn" data-id="{{ task.id }}">Delete</button>
  </li>
{% endfor %}
</ul>
{% if not tasks %}
<p id="emptyState" class="empty-state">No tasks yet</p>
{% endif %}
"""
)


def render_tasks(tasks) -> str:
    """Render the whole task list; the result replaces any earlier render."""
    return _TEMPLATE.render(tasks=list(tasks))
