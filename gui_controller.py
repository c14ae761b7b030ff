import time
import dearpygui.dearpygui as dpg

INTEGRATOR_NAMES = ['euler', 'rk2']


def _make_callbacks(shared):
    def gravity_cb(sender, app_data, user_data):
        try:
            shared['gravity'] = float(app_data)
        except (TypeError, ValueError):
            pass
    def restitution_cb(sender, app_data, user_data):
        try:
            shared['restitution'] = float(app_data)
        except (TypeError, ValueError):
            pass
    def speed_cb(sender, app_data, user_data):
        try:
            shared['launch_speed'] = float(app_data)
        except (TypeError, ValueError):
            pass
    def integrator_cb(sender, app_data, user_data):
        if app_data in INTEGRATOR_NAMES:
            shared['integrator'] = app_data
    def pause_cb():
        shared['toggle_pause'] = True
    def clear_cb():
        shared['clear_sandbox'] = True
    def exit_cb():
        shared['__exit__'] = True
    return gravity_cb, restitution_cb, speed_cb, integrator_cb, pause_cb, clear_cb, exit_cb


def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes values into `shared` dict.
    """
    dpg.create_context()

    gravity_cb, restitution_cb, speed_cb, integrator_cb, pause_cb, clear_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Sandbox Controls", tag="controls_window", width=380, height=320):
        dpg.add_text("Integrator")
        dpg.add_radio_button(INTEGRATOR_NAMES, tag="integrator_radio",
                             default_value=shared.get('integrator', 'euler'), callback=integrator_cb)
        dpg.add_separator()
        dpg.add_text("Gravity (px/s^2)")
        dpg.add_slider_float(label="Gravity", tag="gravity_slider", default_value=float(shared.get('gravity', 981.0)),
                             min_value=-2000.0, max_value=2000.0, callback=gravity_cb)
        dpg.add_text("Wall restitution")
        dpg.add_slider_float(label="Restitution", tag="restitution_slider", default_value=float(shared.get('restitution', 0.6)),
                             min_value=0.0, max_value=1.0, callback=restitution_cb)
        dpg.add_text("Launch speed (px/s)")
        dpg.add_slider_float(label="Speed", tag="speed_slider", default_value=float(shared.get('launch_speed', 600.0)),
                             min_value=0.0, max_value=2000.0, callback=speed_cb)
        dpg.add_separator()
        dpg.add_button(label="Pause / Toggle", callback=lambda s, a, u: pause_cb())
        dpg.add_button(label="Clear", callback=lambda s, a, u: clear_cb())
        dpg.add_button(label="Exit GUI", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='Sandbox Controls', width=400, height=360)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            status = (f"integrator={shared.get('integrator', 'euler')}, "
                      f"projectiles={shared.get('projectile_count', 0)}")
            dpg.set_value("status_text", status)
            # keep the radio in sync with keyboard switches in the main window
            dpg.set_value("integrator_radio", shared.get('integrator', 'euler'))

            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()


if __name__ == "__main__":
    from multiprocessing import Manager
    mgr = Manager()
    shared = mgr.dict()
    shared['integrator'] = 'euler'
    shared['gravity'] = 981.0
    shared['restitution'] = 0.6
    shared['launch_speed'] = 600.0
    run_gui(shared)
