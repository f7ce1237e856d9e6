"""
Dashboard Routes - Admin panel overview
"""

from flask import redirect, render_template, url_for
from utils.data import load_section
from utils.defaults import SECTIONS
from . import dashboard_bp


def get_content_stats():
    """Item counts per section for the dashboard cards"""
    resume = load_section('resume')
    return {
        'photos': len(load_section('photos')),
        'videos': len(load_section('videos')),
        'testimonials': len(load_section('testimonials')),
        'blog': len(load_section('blog')),
        'experience': len(resume.get('experience') or []),
        'skills': len(resume.get('skills') or [])
    }


@dashboard_bp.route('/')
def root():
    return redirect(url_for('dashboard.index'))


@dashboard_bp.route('/dashboard')
def index():
    """Main dashboard page"""
    return render_template('admin/dashboard.html',
                           stats=get_content_stats(),
                           sections=SECTIONS,
                           settings=load_section('settings'))
